import shutil
import zipfile
from io import BytesIO
from pathlib import Path
from xml.etree import ElementTree as ET
from xml.etree.ElementTree import Element

import pytest

OPF = "{http://www.idpf.org/2007/opf}"
DC = "{http://purl.org/dc/elements/1.1/}"
XHTML = "{http://www.w3.org/1999/xhtml}"
OPS = "{http://www.idpf.org/2007/ops}"


def create_temp_dir_fixture(subdir_name: str):
    @pytest.fixture
    def temp_dir_fixture():
        temp_path = Path("tests", "temp") / subdir_name
        if temp_path.exists():
            shutil.rmtree(temp_path)
        temp_path.mkdir(parents=True, exist_ok=True)

        yield temp_path

    return temp_dir_fixture


def read_zip(data: bytes) -> dict[str, zipfile.ZipInfo]:
    with zipfile.ZipFile(BytesIO(data)) as file:
        return {info.filename: info for info in file.infolist()}


def read_entry(data: bytes, name: str) -> bytes:
    with zipfile.ZipFile(BytesIO(data)) as file:
        return file.read(name)


def parse_xml(content: str | bytes) -> Element:
    return ET.fromstring(content)


def nav_root_items(nav: Element) -> list[Element]:
    ol = nav.find(f".//{XHTML}nav/{XHTML}ol")
    assert ol is not None, "nav 元素中应该有 ol"
    return ol.findall(f"{XHTML}li")
