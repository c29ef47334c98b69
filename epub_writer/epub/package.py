from collections.abc import Iterable
from enum import Enum, auto
from xml.etree.ElementTree import Element, SubElement

from ..errors import InvalidArgumentError, InvalidStateError
from ..tools import to_xml_string
from .common import DC_NS, NAV_FILE_NAME, OPF_NS, XML_LANG
from .ids import next_creator_id, next_item_id
from .metadata import NAV_PROPERTY, Creator, ManifestItem, PackageMetadata

PUB_ID = "pub-id"
XHTML_MEDIA_TYPE = "application/xhtml+xml"


class TextMediaType(Enum):
    CSS = "text/css"
    XHTML = XHTML_MEDIA_TYPE
    JAVASCRIPT = "application/javascript"


class NavigationPosition(Enum):
    HIDDEN = auto()
    FIRST_CHAPTER = auto()


class Package:
    """
    package 文档：metadata、manifest 与 spine

    三者之间只通过 manifest id 互相引用，与导航树不共享任何节点，由调用方保持两者同步。
    """

    def __init__(self, language: str, title: str) -> None:
        self._metadata: PackageMetadata = PackageMetadata(title=title, language=language)
        self._manifest: list[ManifestItem] = []
        self._spine: list[str] = []
        self.add_item(NAV_FILE_NAME, XHTML_MEDIA_TYPE, (NAV_PROPERTY,))

    @property
    def metadata(self) -> PackageMetadata:
        return self._metadata

    @property
    def manifest(self) -> list[ManifestItem]:
        return list(self._manifest)

    @property
    def spine(self) -> list[str]:
        return list(self._spine)

    @property
    def nav_item(self) -> ManifestItem:
        for item in self._manifest:
            if item.is_nav:
                return item
        raise InvalidStateError("Could not find the navigation file in the manifest")

    def add_creator(self, name: str, role: str | None = None) -> str:
        creator_id = next_creator_id(c.id for c in self._metadata.creators)
        self._metadata.creators.append(Creator(id=creator_id, name=name, role=role))
        return creator_id

    def add_item(self, href: str, media_type: str, properties: Iterable[str] = ()) -> str:
        item_id = next_item_id(item.id for item in self._manifest)
        self._manifest.append(
            ManifestItem(
                id=item_id,
                href=href,
                media_type=media_type,
                properties=list(properties),
            )
        )
        return item_id

    def find_item(self, item_id: str) -> ManifestItem | None:
        for item in self._manifest:
            if item.id == item_id:
                return item
        return None

    def add_itemref(self, item_id: str) -> ManifestItem:
        item = self.find_item(item_id)
        if item is None:
            raise InvalidArgumentError(f"no manifest item with id {item_id!r}")
        self._spine.append(item_id)
        return item

    def set_nav_position(self, position: NavigationPosition) -> None:
        nav_id = self.nav_item.id
        self._spine = [idref for idref in self._spine if idref != nav_id]
        if position == NavigationPosition.FIRST_CHAPTER:
            self._spine.insert(0, nav_id)

    def serialize(self) -> str:
        metadata = self._metadata
        package = Element(
            "package",
            {
                "xmlns": OPF_NS,
                "version": "3.0",
                XML_LANG: metadata.language,
                "unique-identifier": PUB_ID,
            },
        )
        metadata_elem = SubElement(package, "metadata", {"xmlns:dc": DC_NS})
        SubElement(metadata_elem, "dc:identifier", {"id": PUB_ID}).text = metadata.identifier
        SubElement(metadata_elem, "dc:title").text = metadata.title
        SubElement(metadata_elem, "dc:language").text = metadata.language
        SubElement(metadata_elem, "meta", {"property": "dcterms:modified"}).text = metadata.modified_text

        for creator in metadata.creators:
            SubElement(metadata_elem, "dc:creator", {"id": creator.id}).text = creator.name
            if creator.role is not None:
                SubElement(
                    metadata_elem,
                    "meta",
                    {
                        "refines": f"#{creator.id}",
                        "property": "role",
                        "scheme": "marc:relators",
                        "id": f"{creator.id}-role",
                    },
                ).text = creator.role

        manifest_elem = SubElement(package, "manifest")
        for item in self._manifest:
            attrib = {
                "id": item.id,
                "href": item.href,
                "media-type": item.media_type,
            }
            if item.properties:
                attrib["properties"] = " ".join(item.properties)
            SubElement(manifest_elem, "item", attrib)

        spine_elem = SubElement(package, "spine")
        for idref in self._spine:
            SubElement(spine_elem, "itemref", {"idref": idref})

        return to_xml_string(package)
