# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HtmlObject - an element node that renders itself to markup.

An HtmlObject owns a tag name, an ordered attribute dict, a content string
and an ordered list of child elements. Mutating methods return the element
itself so calls can be chained; ``spawn_child`` returns the new child so a
tree can be built depth-first.

Rendering:
    - ``<tag`` followed by `` name="value"`` for each attribute, in
      insertion order. Values are not escaped.
    - Void elements stop at ``>`` (or `` />`` in XHTML mode). Their
      content and children are kept but never rendered.
    - Otherwise ``>``, then content and rendered children combined
      according to the content placement, then ``</tag>``.

Example:
    Building a small fragment::

        root = HtmlObject('div', {'id': 'main'})
        root.spawn_child('span').set_content('hi')
        root.render()  # '<div id="main"><span>hi</span></div>'

    Chained construction::

        ul = HtmlObject('ul').add_class('menu')
        ul.spawn_child('li').set_content('One')
        ul.spawn_child('li').set_content('Two').add_class('active')
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from .exceptions import CyclicTreeError
from .voids import VOID_ELEMENTS, is_void_tag

logger = logging.getLogger(__name__)

DEFAULT_TAG = 'div'
DATA_PREFIX = 'data-'

# Distinguishes "no value given" from an explicit None in data().
_UNSET: Any = object()


class ContentPlacement(Enum):
    """Where an element's own content goes relative to its children."""

    APPEND = 'append'
    PREPEND = 'prepend'


class HtmlObject:
    """An HTML element that renders to a markup string.

    Attributes:
        tag: The element name (e.g. 'div', 'img').
        attributes: Dict of attribute name -> value, serialized in
            insertion order. Held by reference: the dict given to the
            constructor or to set_attributes() is the one the element uses.
        children: Ordered list of child HtmlObject instances.
        content: Text emitted next to the rendered children.
        placement: ContentPlacement.APPEND (content after children, the
            default) or ContentPlacement.PREPEND (content before children).

    The element tree must not contain cycles. add_child() does not check
    this; render() raises CyclicTreeError when it meets an element that is
    already on the current rendering path.

    Example:
        >>> img = HtmlObject('img', {'src': 'x.png'}, xhtml=True)
        >>> img.render()
        '<img src="x.png" />'
    """

    __slots__ = ('tag', 'attributes', 'children', 'content', 'placement',
                 '_void', '_xhtml')

    VOID_ELEMENTS: frozenset[str] = VOID_ELEMENTS

    def __init__(
        self,
        tag: str | None = None,
        attributes: dict[str, Any] | None = None,
        *,
        xhtml: bool = False,
    ) -> None:
        """Initialize an HtmlObject.

        Args:
            tag: Element name. Defaults to 'div' when None or empty.
            attributes: Initial attributes. Stored as-is, not copied.
            xhtml: If True, void elements self-close with ' />'.
        """
        self.tag = tag or DEFAULT_TAG
        self.children: list[HtmlObject] = []
        self.content = ''
        self.placement = ContentPlacement.APPEND
        self._xhtml = bool(xhtml)

        self.set_attributes({} if attributes is None else attributes)
        self.set_is_void(self.is_void_element(self.tag))

    def __repr__(self) -> str:
        return (
            f"HtmlObject({self.tag!r}, attributes={self.attributes!r}, "
            f"children={len(self.children)})"
        )

    def __str__(self) -> str:
        return self.render()

    # ==================== Void / XHTML ====================

    def set_is_void(self, is_void: bool) -> HtmlObject:
        """Mark this element as void or not.

        Useful for custom elements that should render without a closing
        tag, or to force a normally void tag to render as a pair.
        """
        self._void = bool(is_void)
        return self

    def is_void_element(self, tag: str | None = None) -> bool:
        """Return whether this element, or the given tag, is void.

        Args:
            tag: If omitted (or empty), the element's own void flag is
                returned. Otherwise ``tag`` is looked up in VOID_ELEMENTS;
                the element itself is neither consulted nor changed.
        """
        if not tag:
            return self._void
        return is_void_tag(tag)

    def is_xhtml(self) -> bool:
        """Return whether void elements self-close with ' />'."""
        return self._xhtml

    def set_is_xhtml(self, is_xhtml: bool) -> HtmlObject:
        self._xhtml = bool(is_xhtml)
        return self

    def get_tag(self) -> str:
        return self.tag

    # ==================== Attributes ====================

    def get_attribute(self, name: str) -> Any:
        """Return the attribute value, or None if it is not set."""
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: Any) -> HtmlObject:
        """Set an attribute, overwriting any previous value."""
        self.attributes[name] = value
        return self

    def remove_attribute(self, name: str) -> HtmlObject:
        """Remove an attribute. Does nothing if it is not set."""
        self.attributes.pop(name, None)
        return self

    def set_attributes(self, attributes: dict[str, Any]) -> HtmlObject:
        """Replace all attributes with ``attributes`` (held by reference)."""
        self.attributes = attributes
        return self

    def add_attributes(self, attributes: dict[str, Any]) -> HtmlObject:
        """Merge ``attributes`` into the current ones, key by key."""
        for name, value in attributes.items():
            self.set_attribute(name, value)
        return self

    def get_attributes(self) -> dict[str, Any]:
        """Return the live attribute dict.

        Changes made to the returned dict are changes to the element.
        """
        return self.attributes

    def render_attributes(self) -> str:
        """Serialize attributes as `` name="value"`` pairs.

        Returns an empty string when there are no attributes. Values are
        written verbatim: quotes, ampersands and angle brackets are not
        escaped.
        """
        return ''.join(
            f' {name}="{value}"' for name, value in self.attributes.items()
        )

    # ==================== Class helpers ====================

    def add_class(self, class_name: str) -> HtmlObject:
        """Append a class name to the 'class' attribute.

        Duplicates are kept: adding 'a' twice gives ``class="a a"``.
        """
        current = self.get_attribute('class')
        classes = current.split(' ') if current else []
        classes.append(class_name)
        return self.set_attribute('class', ' '.join(classes))

    def remove_class(self, class_name: str) -> HtmlObject:
        """Remove the first occurrence of a class name.

        If there is no 'class' attribute nothing happens. Removing the
        last class leaves ``class=""`` rather than deleting the attribute.
        """
        current = self.get_attribute('class')
        if current is None:
            return self

        classes = current.split(' ')
        if class_name in classes:
            classes.remove(class_name)

        return self.set_attribute('class', ' '.join(classes))

    # ==================== Data helpers ====================

    def set_data(self, key: str, value: Any) -> HtmlObject:
        return self.set_attribute(DATA_PREFIX + key, value)

    def get_data(self, key: str) -> Any:
        return self.get_attribute(DATA_PREFIX + key)

    def remove_data(self, key: str) -> HtmlObject:
        return self.remove_attribute(DATA_PREFIX + key)

    def data(self, key: str, value: Any = _UNSET) -> Any:
        """Get or set a ``data-*`` attribute.

        Args:
            key: Name without the 'data-' prefix.
            value: If given, the attribute is set and the element returned.
                If omitted, the current value (or None) is returned.

        Example:
            >>> el = HtmlObject().data('id', '7')
            >>> el.data('id')
            '7'
        """
        if value is _UNSET:
            return self.get_data(key)
        return self.set_data(key, value)

    # ==================== Content ====================

    def set_content(self, content: str) -> HtmlObject:
        self.content = content
        return self

    def append_content(self, content: str) -> HtmlObject:
        self.content += content
        return self

    def prepend_content(self, content: str) -> HtmlObject:
        self.content = content + self.content
        return self

    def clear_content(self) -> HtmlObject:
        self.content = ''
        return self

    def set_append_content(self) -> HtmlObject:
        """Render content after the children."""
        self.placement = ContentPlacement.APPEND
        return self

    def set_prepend_content(self) -> HtmlObject:
        """Render content before the children."""
        self.placement = ContentPlacement.PREPEND
        return self

    # ==================== Children ====================

    def add_child(self, child: HtmlObject) -> HtmlObject:
        """Append an existing element as the last child.

        The child keeps its own XHTML flag. Nothing prevents adding an
        ancestor here; the resulting cycle is reported by render().
        """
        self.children.append(child)
        return self

    def spawn_child(
        self,
        tag: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> HtmlObject:
        """Create a child element, append it and return the child.

        The child starts with this element's current XHTML flag. Later
        changes to this element's flag do not reach the child.

        Example:
            >>> root = HtmlObject('ul')
            >>> root.spawn_child('li').set_content('One')
            >>> root.render()
            '<ul><li>One</li></ul>'
        """
        child = HtmlObject(tag, attributes)
        child.set_is_xhtml(self.is_xhtml())
        self.add_child(child)
        return child

    # ==================== Rendering ====================

    def render_children(self) -> str:
        """Render all children in order and concatenate the results."""
        return self._render_children({id(self)})

    def render(self) -> str:
        """Render this element and its subtree to markup.

        Raises:
            CyclicTreeError: If an element is its own ancestor.
        """
        return self._render(set())

    def _render(self, ancestors: set[int]) -> str:
        key = id(self)
        if key in ancestors:
            logger.debug("Cycle detected at <%s>", self.tag)
            raise CyclicTreeError(
                f"<{self.tag}> is its own ancestor; the element tree has a cycle"
            )

        parts = ['<', self.tag, self.render_attributes()]

        if self.is_void_element():
            if self.children or self.content:
                logger.debug(
                    "Void element <%s> drops %d children and %d chars of content",
                    self.tag, len(self.children), len(self.content),
                )
            if self.is_xhtml():
                parts.append(' /')
            parts.append('>')
            return ''.join(parts)

        parts.append('>')

        body = ''
        if self.children:
            ancestors.add(key)
            try:
                body = self._render_children(ancestors)
            finally:
                ancestors.discard(key)

        if self.placement is ContentPlacement.PREPEND:
            parts.extend((self.content, body))
        else:
            parts.extend((body, self.content))

        parts.extend(('</', self.tag, '>'))
        return ''.join(parts)

    def _render_children(self, ancestors: set[int]) -> str:
        return ''.join(child._render(ancestors) for child in self.children)
