# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Void element table.

Void elements have no closing tag and no content model. They render as
``<tag>``, or ``<tag />`` when the element is in XHTML mode.

The table is matched case-sensitively: ``'br'`` is void, ``'BR'`` is not.

Example:
    >>> is_void_tag('img')
    True
    >>> is_void_tag('span')
    False
"""

from __future__ import annotations

VOID_ELEMENTS: frozenset[str] = frozenset({
    'area',
    'base',
    'br',
    'col',
    'command',
    'embed',
    'hr',
    'img',
    'input',
    'keygen',
    'link',
    'meta',
    'param',
    'source',
    'track',
    'wbr',
})


def is_void_tag(tag: str) -> bool:
    """Return True if ``tag`` is listed in VOID_ELEMENTS."""
    return tag in VOID_ELEMENTS
