"""Data models for icon discovery"""

from enum import Enum, unique
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from iconfinder.icons.constants import ICON_SOURCE_PRIORITY


@unique
class IconSource(str, Enum):
    """Where an icon candidate was declared. Each source has a fixed priority tier."""

    APPLE_TOUCH_ICON = "apple-touch-icon"
    FAVICON = "favicon"
    OG_IMAGE = "og-image"
    MANIFEST = "manifest"

    @property
    def priority(self) -> int:
        """Return the priority tier of this source, 1 being the best."""
        return ICON_SOURCE_PRIORITY[self.value]


class IconCandidate(BaseModel):
    """An icon reference discovered on a page.

    Candidates are immutable. `priority` is derived from `source` so the two can
    never disagree.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    width: int = Field(ge=0)
    height: int = Field(ge=0)
    source: IconSource

    @computed_field  # type: ignore[prop-decorator]
    @property
    def priority(self) -> int:
        """Priority tier of the candidate (lower is better)."""
        return self.source.priority

    @property
    def size(self) -> str:
        """Dimensions formatted as `WxH`."""
        return f"{self.width}x{self.height}"

    def size_distance(self, target_size: int) -> int:
        """Manhattan distance between this candidate's size and a square target."""
        return abs(self.width - target_size) + abs(self.height - target_size)


class ManifestIcon(BaseModel):
    """An entry of a web app manifest's `icons` array."""

    src: str
    sizes: Optional[str] = None
    type: Optional[str] = None


class WebManifest(BaseModel):
    """The part of a web app manifest used for icon discovery.

    Entries of `icons` are left raw and checked one at a time against `ManifestIcon`,
    so a single malformed entry does not discard its siblings.
    """

    icons: Optional[list[Any]] = None


class IconResolution(BaseModel):
    """The outcome of resolving a page: the winner and every candidate, best first."""

    best_icon: IconCandidate
    icons: list[IconCandidate]
