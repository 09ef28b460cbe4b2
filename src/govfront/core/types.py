"""Core type definitions.

Content API payloads are converted into these dataclasses at the client
boundary so handlers and the renderer never touch raw JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Mapping
from typing import Any, NewType
from urllib.parse import unquote

# Content section identifier (e.g., "crime-and-justice", "crime-and-justice/judges")
Slug = NewType("Slug", str)

# Layout format consumed by the shared page layout
RENDER_FORMAT = "browse"


@dataclass(frozen=True)
class Section:
    """Browse section (a content API tag)."""

    slug: Slug
    title: str
    description: str | None = None
    web_url: str | None = None
    parent: Section | None = None

    @property
    def browse_path(self) -> str:
        """Path of this section's browse page."""
        return f"/browse/{self.slug}"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Section:
        """Build a section from a content API tag payload."""
        details = data.get("details") or {}
        parent_data = data.get("parent")
        return cls(
            slug=Slug(data.get("slug") or _slug_from_tag_id(data["id"])),
            title=data["title"],
            description=details.get("description"),
            web_url=data.get("web_url"),
            parent=cls.from_dict(parent_data) if parent_data else None,
        )


@dataclass(frozen=True)
class Artefact:
    """Piece of content filed under a section."""

    title: str
    web_url: str
    format: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Artefact:
        details = data.get("details") or {}
        return cls(
            title=data["title"],
            web_url=data["web_url"],
            format=data.get("format"),
            description=details.get("description"),
        )


@dataclass(frozen=True)
class DetailedGuidance:
    """Detailed guidance category filed under a browse sub-section."""

    title: str
    web_url: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DetailedGuidance:
        details = data.get("details") or {}
        content_with_tag = data.get("content_with_tag") or {}
        return cls(
            title=data["title"],
            web_url=content_with_tag["web_url"],
            description=details.get("description"),
        )


def _slug_from_tag_id(tag_id: str) -> str:
    # ".../tags/crime-and-justice%2Fjudges.json" -> "crime-and-justice/judges"
    name = tag_id.rsplit("/", 1)[-1]
    name = name.removesuffix(".json")
    return unquote(name)
