# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlObject exceptions."""

from __future__ import annotations


class HtmlObjectError(Exception):
    """Base exception for HtmlObject errors."""

    pass


class CyclicTreeError(HtmlObjectError):
    """Raised when an element is rendered while it is one of its own ancestors."""

    pass
