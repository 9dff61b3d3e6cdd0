"""Serialization of tag-record trees to XML text.

A tree is a single-key mapping ``{tag: value}`` where ``value`` is:

- ``None``: an empty element
- a string, number or bool: the element text (escaped)
- a list of single-key mappings: child elements, in order; the special keys
  ``_attr`` (attribute mapping) and ``_cdata`` (text) apply to the enclosing
  element
- a mapping: treated like a list of its items

ElementTree has no CDATA node, so ``_cdata`` content is written as escaped
text (``&lt;p&gt;`` rather than ``<![CDATA[<p>]]>``). Parsers read both forms
as the same character data. Attributes whose value is ``None`` are left out,
and characters that XML 1.0 does not allow (C0 controls other than tab, LF
and CR, lone surrogates, U+FFFE and U+FFFF) are dropped from text and
attribute values so the output is always well formed.

Example:
    >>> to_xml({"rss": [{"_attr": {"version": "2.0"}}, {"channel": []}]})
    '<?xml version="1.0" encoding="UTF-8"?>\\n<rss version="2.0">\\n\\t<channel />\\n</rss>'
"""

import re
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any

from rss_renderer.utils.errors import UpstreamDataError

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

INVALID_XML_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return INVALID_XML_CHARS.sub("", str(value))


def _fill(element: ET.Element, value: Any) -> None:
    if value is None:
        return

    if isinstance(value, Mapping):
        value = [{key: child} for key, child in value.items()]

    if not isinstance(value, list):
        element.text = _text(value)
        return

    for record in value:
        if not isinstance(record, Mapping):
            raise UpstreamDataError(
                f"Children of <{element.tag}> must be tag-records, "
                f"got {type(record).__name__}"
            )
        for key, child in record.items():
            if key == "_attr":
                for name, attr_value in (child or {}).items():
                    if attr_value is not None:
                        element.set(name, _text(attr_value))
            elif key == "_cdata":
                element.text = (element.text or "") + _text(child)
            else:
                _fill(ET.SubElement(element, key), child)


def build_element(tree: Mapping[str, Any]) -> ET.Element:
    """Convert a single-key tree into an ElementTree element.

    Raises:
        UpstreamDataError: If the tree does not have exactly one root tag
    """
    if not isinstance(tree, Mapping) or len(tree) != 1:
        raise UpstreamDataError("An XML document must have exactly one root tag")

    tag, value = next(iter(tree.items()))
    root = ET.Element(tag)
    _fill(root, value)
    return root


def to_xml(
    tree: Mapping[str, Any],
    *,
    declaration: bool = True,
    indent: str | None = "\t",
) -> str:
    """Serialize a tag-record tree to XML text.

    Args:
        tree: Single-root tag-record tree
        declaration: Prefix the document with an XML declaration
        indent: Indentation unit; ``None`` or empty for compact output

    Returns:
        XML document as a string
    """
    root = build_element(tree)
    if indent:
        ET.indent(root, space=indent)

    body = ET.tostring(root, encoding="unicode")
    if declaration:
        return f"{XML_DECLARATION}\n{body}"
    return body
