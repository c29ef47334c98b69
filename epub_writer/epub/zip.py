import zipfile
from enum import Enum
from io import BytesIO
from logging import getLogger
from typing import Self

from ..errors import InvalidStateError
from .common import MIMETYPE, MIMETYPE_PATH, normalize_path

_logger = getLogger(__name__)


class Compression(Enum):
    STORED = zipfile.ZIP_STORED
    DEFLATED = zipfile.ZIP_DEFLATED


class Zip:
    """
    内存中的 EPUB 容器

    创建时先写入未压缩的 mimetype，它必须是第一个条目，阅读器通过文件开头的字节识别容器类型。
    其余条目按调用顺序追加，finalize 只能调用一次。
    """

    def __init__(self, compresslevel: int | None = None) -> None:
        self._buffer: BytesIO = BytesIO()
        self._file: zipfile.ZipFile | None = zipfile.ZipFile(self._buffer, "w")
        self._compresslevel: int | None = compresslevel
        self._names: list[str] = []
        self._finalized: bool = False
        self.put(MIMETYPE_PATH, MIMETYPE, Compression.STORED)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def names(self) -> list[str]:
        return list(self._names)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def put(
        self,
        path: str,
        content: str | bytes,
        compression: Compression = Compression.DEFLATED,
    ) -> None:
        file = self._require_open()
        if isinstance(content, str):
            content = content.encode("utf-8")
        path = normalize_path(path)
        file.writestr(
            path,
            content,
            compress_type=compression.value,
            compresslevel=self._compresslevel,
        )
        self._names.append(path)
        _logger.debug("zip entry %s (%d bytes, %s)", path, len(content), compression.name)

    def finalize(self) -> bytes:
        file = self._require_open()
        file.close()
        self._file = None
        self._finalized = True
        with self._buffer:
            return self._buffer.getvalue()

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None
        self._buffer.close()

    def _require_open(self) -> zipfile.ZipFile:
        if self._finalized:
            raise InvalidStateError("the archive has already been finalized")
        if self._file is None:
            raise InvalidStateError("the archive has been closed")
        return self._file
