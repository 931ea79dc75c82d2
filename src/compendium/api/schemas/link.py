"""Pydantic schemas for quick link API endpoints."""

from pydantic import ConfigDict, Field

from compendium.api.schemas.base import CamelModel
from compendium.domain.models import QuickLinkDraft


class LinkRequest(CamelModel):
    name: str = Field(min_length=1)
    url: str = Field(min_length=1)
    logo_svg: str | None = None

    def to_draft(self) -> QuickLinkDraft:
        return QuickLinkDraft(name=self.name, url=self.url, logo_svg=self.logo_svg)


class LinkResponse(CamelModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | str
    name: str
    url: str
    logo_svg: str | None = None
