#!/usr/bin/env python3
"""
HTML Element Builder
Small helpers for rendering tags, attribute lists and class attributes.
"""

from html import escape
from typing import Iterable, Mapping, Optional, Union


def wrap_and_join(parts: Iterable[str], lhs: str, sep: str, rhs: str, alt: str = "") -> str:
    """Join parts with sep and wrap the result in lhs/rhs, or return alt when empty."""
    joined = sep.join(parts)
    if joined:
        return f"{lhs}{joined}{rhs}"
    return alt


def format_attributes(attributes: Mapping[str, str]) -> str:
    """Render a mapping as key="value" pairs with escaped values, in mapping order."""
    return " ".join(f'{key}="{escape(str(value), quote=True)}"' for key, value in attributes.items())


def make_element(tag: str, attributes: Optional[Union[str, Mapping[str, str]]] = None, content: str = "") -> str:
    """
    Render <tag attrs>content</tag>.

    Args:
        tag: Element name
        attributes: Preformatted attribute string or a mapping of attribute values
        content: Inner HTML, inserted as is

    Returns:
        The element markup; no attribute section when attributes is empty
    """
    if attributes is not None and not isinstance(attributes, str):
        attributes = format_attributes(attributes)
    if attributes:
        return f"<{tag} {attributes}>{content}</{tag}>"
    return f"<{tag}>{content}</{tag}>"


def class_attribute(classes: Iterable[str]) -> str:
    """Build class="a b" from escaped class names, or "" when there are none."""
    return wrap_and_join((escape(c, quote=True) for c in classes), 'class="', " ", '"')
