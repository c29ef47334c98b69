from xml.etree.ElementTree import Element, SubElement

from ..errors import InvalidArgumentError
from ..tools import to_xml_string

MIMETYPE = "application/epub+zip"
MIMETYPE_PATH = "mimetype"
META_FOLDER = "META-INF"
CONTAINER_FILE_NAME = "container.xml"
NAV_FILE_NAME = "nav.xhtml"
OPF_FILE_NAME = "package.opf"

OPF_NS = "http://www.idpf.org/2007/opf"
DC_NS = "http://purl.org/dc/elements/1.1/"
XHTML_NS = "http://www.w3.org/1999/xhtml"
OPS_NS = "http://www.idpf.org/2007/ops"
CONTAINER_NS = "urn:oasis:names:tc:opendocument:xmlns:container"
XML_LANG = "{http://www.w3.org/XML/1998/namespace}lang"


def combine(path1: str, path2: str) -> str:
    if path1.endswith("/") or path1.endswith("\\"):
        combined = path1 + path2
    else:
        combined = path1 + "/" + path2
    return normalize_path(combined)


def make_relative(full_path: str, root: str) -> str:
    if not full_path.startswith(root):
        raise InvalidArgumentError(f"path {full_path!r} is not a child of {root!r}")
    if root.endswith("/") or root.endswith("\\"):
        relative_path = full_path[len(root) :]
    elif full_path[len(root) : len(root) + 1] in ("/", "\\"):
        relative_path = full_path[len(root) + 1 :]
    else:
        raise InvalidArgumentError(f"path {full_path!r} is not a child of {root!r}")
    return normalize_path(relative_path)


def normalize_path(path: str) -> str:
    return path.replace("\\", "/")


def resource_href(path: str) -> str:
    # href 相对于 content 目录，开头的斜杠会在容器里产生 "OEBPS//a.xhtml"
    href = normalize_path(path).lstrip("/")
    if not href:
        raise InvalidArgumentError(f"resource path {path!r} has no file name")
    return href


def container_xml(opf_path: str) -> str:
    container = Element("container", {"version": "1.0", "xmlns": CONTAINER_NS})
    rootfiles = SubElement(container, "rootfiles")
    SubElement(
        rootfiles,
        "rootfile",
        {
            "full-path": opf_path,
            "media-type": "application/oebps-package+xml",
        },
    )
    return to_xml_string(container)
