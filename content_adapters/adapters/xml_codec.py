"""Conversion of plain Python data into XML documents."""

from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

from lxml import etree

from content_adapters.exceptions import XMLConversionException

DEFAULT_ENCODING = "UTF-8"


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _fill(element: etree._Element, value: Any, attribute_key: str, text_key: str) -> None:
    if value is None:
        return
    if not isinstance(value, Mapping):
        element.text = _text(value)
        return

    for key, child in value.items():
        if key == attribute_key and isinstance(child, Mapping):
            for name, attr in child.items():
                element.set(str(name), _text(attr))
        elif key == text_key:
            element.text = _text(child)
        elif _is_sequence(child):
            # sequences repeat the element under the parent key
            for item in child:
                _fill(etree.SubElement(element, str(key)), item, attribute_key, text_key)
        else:
            _fill(etree.SubElement(element, str(key)), child, attribute_key, text_key)


def to_xml(root: str, data: Any, configuration: Mapping[str, Any] | None = None) -> str:
    """Convert ``data`` into an XML document whose root tag is ``root``.

    Args:
        root: Name of the document root element
        data: Mappings, sequences and scalars to convert
        configuration: Optional settings:
            ``declaration`` (bool or mapping with ``encoding``, default True),
            ``pretty_print`` (default True),
            ``attribute_key`` (default ``"@"``),
            ``text_key`` (default ``"#"``)

    Returns:
        The serialized XML document

    Raises:
        XMLConversionException: If a key is not a valid XML name
    """
    configuration = configuration or {}
    attribute_key = configuration.get("attribute_key", "@")
    text_key = configuration.get("text_key", "#")
    pretty_print = bool(configuration.get("pretty_print", True))
    declaration = configuration.get("declaration", True)

    try:
        element = etree.Element(root)
        if _is_sequence(data):
            # a top-level sequence repeats the root's children as <item>
            for item in data:
                _fill(etree.SubElement(element, "item"), item, attribute_key, text_key)
        else:
            _fill(element, data, attribute_key, text_key)
    except (ValueError, TypeError) as e:
        raise XMLConversionException(
            f"Unable to convert data to XML: {e}",
            details={"root": root},
        ) from e

    if not declaration:
        return etree.tostring(element, encoding="unicode", pretty_print=pretty_print)

    encoding = DEFAULT_ENCODING
    if isinstance(declaration, Mapping):
        encoding = declaration.get("encoding") or DEFAULT_ENCODING
    document = etree.tostring(element, xml_declaration=True, encoding=encoding, pretty_print=pretty_print)
    return document.decode(encoding)
