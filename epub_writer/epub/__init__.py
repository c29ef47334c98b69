from .common import combine, container_xml, make_relative
from .ids import next_creator_id, next_item_id
from .metadata import Creator, ManifestItem, PackageMetadata
from .package import NavigationPosition, Package, TextMediaType
from .toc import Navigation, Toc, TocHandle
from .zip import Compression, Zip
