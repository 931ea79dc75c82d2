"""Parser that cleans inline SVG logos attached to quick links."""

from bs4 import BeautifulSoup
from bs4.element import Tag
from loguru import logger

from compendium.domain.exceptions import ValidationError

UNSAFE_TAGS = ("script", "foreignobject", "iframe", "object", "embed")
URL_PREFIXES = ("http://", "https://", "data:image/")


class LogoParser:
    """Sanitizer for quick link logos given as raw SVG markup or an image URL."""

    @classmethod
    def is_url(cls, value: str) -> bool:
        return value.lower().startswith(URL_PREFIXES)

    @classmethod
    def sanitize(cls, logo: str | None) -> str | None:
        """
        Return a logo safe to inline into a page.

        Blank input means "no logo". URLs are returned unchanged; markup must
        contain an ``<svg>`` element, which is returned without scripts,
        event handler attributes or ``javascript:`` links.
        """
        if logo is None or not logo.strip():
            return None

        logo = logo.strip()
        if cls.is_url(logo):
            return logo

        soup = BeautifulSoup(logo, "lxml")
        svg = soup.find("svg")
        if not isinstance(svg, Tag):
            raise ValidationError("Logo must be an <svg> element or an image URL")

        removed = 0
        for tag in svg.find_all(list(UNSAFE_TAGS)):
            # nested inside an element already removed
            if tag.decomposed:
                continue
            tag.decompose()
            removed += 1

        for tag in [svg, *svg.find_all(True)]:
            for attr in list(tag.attrs):
                value = tag.attrs[attr]
                text = " ".join(value) if isinstance(value, list) else str(value)
                if attr.lower().startswith("on") or text.strip().lower().startswith("javascript:"):
                    del tag.attrs[attr]
                    removed += 1

        if removed:
            logger.warning(f"Stripped {removed} unsafe element(s)/attribute(s) from logo")

        return str(svg)
