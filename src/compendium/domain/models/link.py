from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..exceptions import ValidationError
from .problem import RecordId


@dataclass(frozen=True)
class QuickLinkDraft:
    name: str
    url: str
    logo_svg: str | None = None

    def validated(self) -> QuickLinkDraft:
        name = self.name.strip() if isinstance(self.name, str) else ""
        url = self.url.strip() if isinstance(self.url, str) else ""
        if not name:
            raise ValidationError("Link name is required")
        if not url:
            raise ValidationError("Link URL is required")
        return replace(self, name=name, url=url)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url, "logoSvg": self.logo_svg}


@dataclass(frozen=True)
class QuickLink:
    """Bookmark shown in the quick links bar."""

    id: RecordId
    name: str
    url: str
    logo_svg: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "url": self.url, "logoSvg": self.logo_svg}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QuickLink:
        if not isinstance(data, dict):
            raise ValidationError(f"Link record must be an object, got {type(data).__name__}")
        if data.get("id") is None:
            raise ValidationError("Link record has no id")
        return cls(
            id=data["id"],
            name=str(data.get("name") or ""),
            url=str(data.get("url") or ""),
            logo_svg=data.get("logoSvg"),
        )
