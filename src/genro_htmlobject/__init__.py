# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-HtmlObject - Programmatic HTML markup builder.

A lightweight, zero-dependency library for assembling HTML element trees
imperatively and rendering them to markup strings.
"""

__version__ = "0.1.0"

from .element import ContentPlacement, HtmlObject
from .exceptions import CyclicTreeError, HtmlObjectError
from .voids import VOID_ELEMENTS, is_void_tag

__all__ = [
    # Core classes
    "HtmlObject",
    "ContentPlacement",
    # Void table
    "VOID_ELEMENTS",
    "is_void_tag",
    # Exceptions
    "HtmlObjectError",
    "CyclicTreeError",
]
