import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

MODIFIED_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

NAV_PROPERTY = "nav"
COVER_IMAGE_PROPERTY = "cover-image"


@dataclass
class Creator:
    id: str
    name: str
    role: str | None = None  # MARC relator code, e.g. "aut"


@dataclass
class PackageMetadata:
    title: str
    language: str
    identifier: str = field(default_factory=lambda: str(uuid.uuid4()))
    modified: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    creators: list[Creator] = field(default_factory=list)

    @property
    def modified_text(self) -> str:
        return self.modified.astimezone(timezone.utc).strftime(MODIFIED_FORMAT)


@dataclass
class ManifestItem:
    id: str
    href: str
    media_type: str
    properties: list[str] = field(default_factory=list)

    @property
    def is_nav(self) -> bool:
        return NAV_PROPERTY in self.properties

    @property
    def is_cover_image(self) -> bool:
        return COVER_IMAGE_PROPERTY in self.properties
