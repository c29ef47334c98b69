from logging import getLogger
from os import PathLike
from pathlib import Path
from typing import BinaryIO, Self

from .epub import (
    Navigation,
    NavigationPosition,
    Package,
    TextMediaType,
    TocHandle,
    Zip,
    combine,
    container_xml,
)
from .epub.common import (
    CONTAINER_FILE_NAME,
    META_FOLDER,
    NAV_FILE_NAME,
    OPF_FILE_NAME,
    normalize_path,
    resource_href,
)
from .epub.metadata import COVER_IMAGE_PROPERTY
from .errors import InvalidArgumentError, ResourceError

_logger = getLogger(__name__)

_IMAGE_MEDIA_TYPES = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "svg": "image/svg+xml",
}


class Epub:
    """
    在内存中构建 EPUB 3 书籍

    资源文件添加时立即写入压缩包；导航文档、META-INF/container.xml 和 package 文档
    由 finalize 最后写入。save 会保留 finalize 得到的字节，写出失败后可以再次 save。
    """

    def __init__(
        self,
        language: str,
        title: str,
        author: str | None = None,
        *,
        content_folder: str = "OEBPS",
        compresslevel: int | None = None,
    ) -> None:
        self._content_folder: str = normalize_path(content_folder).rstrip("/")
        self._zip: Zip = Zip(compresslevel=compresslevel)
        self._package: Package = Package(language=language, title=title)
        self._nav: Navigation = Navigation()
        self._data: bytes | None = None
        if author is not None:
            self.add_author(author)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def content_folder(self) -> str:
        return self._content_folder

    @property
    def package(self) -> Package:
        return self._package

    @property
    def navigation(self) -> Navigation:
        return self._nav

    def add_author(self, name: str, role: str | None = None) -> str:
        return self._package.add_creator(name, role)

    def add_text_file(self, path: str, content: str, media_type: TextMediaType) -> str:
        href = resource_href(path)
        self._zip.put(combine(self._content_folder, href), content)
        item_id = self._package.add_item(href, media_type.value)
        _logger.debug("manifest item %s -> %s (%s)", item_id, href, media_type.value)
        return item_id

    def add_image(self, path: str, content: bytes, cover: bool = False) -> str:
        href = resource_href(path)
        extension = Path(href).suffix.lower().removeprefix(".")
        media_type = _IMAGE_MEDIA_TYPES.get(extension)
        if media_type is None:
            raise InvalidArgumentError(
                f"unsupported image type {extension!r} for {path!r}: EPUB supports jpeg, png, gif and svg"
            )
        self._zip.put(combine(self._content_folder, href), content)
        properties = (COVER_IMAGE_PROPERTY,) if cover else ()
        item_id = self._package.add_item(href, media_type, properties)
        _logger.debug("manifest item %s -> %s (%s)", item_id, href, media_type)
        return item_id

    def add_spine(self, item_id: str, nav_title: str | None = None) -> None:
        item = self._package.add_itemref(item_id)
        self._nav.add_item(item.href, _nav_title(item.href, nav_title))

    def add_section(
        self,
        item_id: str,
        nav_title: str | None = None,
        parent: TocHandle | None = None,
    ) -> TocHandle:
        item = self._package.add_itemref(item_id)
        return self._nav.add_parent_item(item.href, _nav_title(item.href, nav_title), parent)

    def set_navigation(self, position: NavigationPosition) -> None:
        self._package.set_nav_position(position)

    def finalize(self) -> bytes:
        self._zip.put(combine(self._content_folder, NAV_FILE_NAME), self._nav.serialize())
        opf_path = combine(self._content_folder, OPF_FILE_NAME)
        self._zip.put(combine(META_FOLDER, CONTAINER_FILE_NAME), container_xml(opf_path))
        self._zip.put(opf_path, self._package.serialize())
        return self._zip.finalize()

    def save(self, target: str | PathLike | BinaryIO) -> None:
        if self._data is None:
            self._data = self.finalize()
        data = self._data
        try:
            if isinstance(target, (str, PathLike)):
                with open(target, "wb") as file:
                    file.write(data)
            else:
                target.write(data)
        except OSError as e:
            raise ResourceError(f"failed to write epub: {e}") from e
        _logger.info("saved epub %r (%d bytes)", self._package.metadata.title, len(data))

    def close(self) -> None:
        self._data = None
        self._zip.close()


def _nav_title(href: str, nav_title: str | None) -> str:
    if nav_title is not None:
        return nav_title
    return Path(href).stem
