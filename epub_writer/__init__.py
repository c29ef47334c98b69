from .book import Epub
from .epub import NavigationPosition, TextMediaType, TocHandle, combine, make_relative
from .errors import EpubError, InvalidArgumentError, InvalidStateError, ResourceError

__all__ = [
    "Epub",
    "NavigationPosition",
    "TextMediaType",
    "TocHandle",
    "combine",
    "make_relative",
    "EpubError",
    "InvalidArgumentError",
    "InvalidStateError",
    "ResourceError",
]
