from dataclasses import dataclass
from xml.etree.ElementTree import Element, SubElement

from ..errors import InvalidArgumentError
from ..tools import to_xml_string
from .common import OPS_NS, XHTML_NS


@dataclass
class Toc:
    """
    导航文档中的一个目录项

    对应关系:
        - title <-> <a> 或 <span> 标签的文本内容
        - href <-> <a href>
        - children <-> 嵌套的 <ol><li>；None 表示叶子节点，列表（可以为空）表示分组节点
    """

    title: str
    href: str | None = None
    children: list["Toc"] | None = None

    @property
    def is_section(self) -> bool:
        return self.children is not None


@dataclass(frozen=True)
class TocHandle:
    """Navigation 内部某个 <ol> 列表的索引，只在创建它的 Navigation 中有效"""

    index: int


class Navigation:
    def __init__(self) -> None:
        self._root: list[Toc] = []
        self._lists: list[list[Toc]] = [self._root]

    @property
    def root(self) -> TocHandle:
        return TocHandle(0)

    @property
    def items(self) -> list[Toc]:
        return list(self._root)

    def add_item(self, path: str, text: str, parent: TocHandle | None = None) -> None:
        """
        添加一个叶子目录项

        Args:
            path: 相对于导航文档的路径
            text: 显示的文本
            parent: 所属的列表，默认为根列表
        """
        self._list_of(parent).append(Toc(title=text, href=path))

    def add_parent_item(self, path: str | None, text: str, parent: TocHandle | None = None) -> TocHandle:
        """
        添加一个分组目录项，它带有一个新的空列表

        Returns:
            新列表的句柄，用于继续向其中添加子目录项
        """
        children: list[Toc] = []
        self._list_of(parent).append(Toc(title=text, href=path, children=children))
        self._lists.append(children)
        return TocHandle(len(self._lists) - 1)

    def serialize(self) -> str:
        html = Element("html", {"xmlns": XHTML_NS, "xmlns:epub": OPS_NS})
        head = SubElement(html, "head")
        SubElement(head, "title").text = "Navigation"
        SubElement(
            head,
            "meta",
            {
                "http-equiv": "content-type",
                "content": "text/html; charset=UTF-8",
            },
        )
        body = SubElement(html, "body")
        nav = SubElement(body, "nav", {"epub:type": "toc", "id": "toc"})
        _append_list(nav, self._root)
        return to_xml_string(html, doctype="<!DOCTYPE html>")

    def _list_of(self, handle: TocHandle | None) -> list[Toc]:
        if handle is None:
            return self._root
        if not 0 <= handle.index < len(self._lists):
            raise InvalidArgumentError(f"unknown navigation list handle: {handle.index}")
        return self._lists[handle.index]


def _append_list(parent: Element, toc_list: list[Toc]) -> None:
    ol = SubElement(parent, "ol")
    for toc in toc_list:
        li = SubElement(ol, "li")
        if toc.href is not None:
            SubElement(li, "a", {"href": toc.href}).text = toc.title
        else:
            SubElement(li, "span").text = toc.title
        if toc.children is not None:
            _append_list(li, toc.children)
