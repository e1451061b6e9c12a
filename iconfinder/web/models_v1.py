"""Response models for the v1 API"""

from pydantic import BaseModel

from iconfinder.icons.models import IconCandidate


class IconResponse(BaseModel):
    """Model for a single icon candidate."""

    url: str
    size: str
    type: str

    @classmethod
    def from_candidate(cls, icon: IconCandidate) -> "IconResponse":
        """Build the response model of a candidate."""
        return cls(url=icon.url, size=icon.size, type=icon.source.value)


class IconsResponse(BaseModel):
    """Model for the response of the `icons` endpoint."""

    best_icon: IconResponse
    all_icons: list[IconResponse]
