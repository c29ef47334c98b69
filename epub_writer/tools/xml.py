from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def indent(elem: Element, level: int = 0) -> Element:
    indent_str = "  " * level
    next_indent_str = "  " * (level + 1)
    if len(elem):
        if not elem.text or not elem.text.strip():
            elem.text = "\n" + next_indent_str
        for i, child in enumerate(elem):
            indent(child, level + 1)
            if not child.tail or not child.tail.strip():
                if i == len(elem) - 1:
                    child.tail = "\n" + indent_str
                else:
                    child.tail = "\n" + next_indent_str
    return elem


def to_xml_string(root: Element, doctype: str | None = None) -> str:
    """
    将元素树渲染为带 XML 声明的文本（会就地缩进 root）

    Args:
        root: 根元素
        doctype: 可选的文档类型声明，如 "<!DOCTYPE html>"

    Returns:
        完整的 XML 文档文本
    """
    indent(root)
    lines = [XML_DECLARATION]
    if doctype is not None:
        lines.append(doctype)
    lines.append(ET.tostring(root, encoding="unicode"))
    return "\n".join(lines) + "\n"
