"""Repository protocols for browse content.

Handlers depend on these protocols rather than on the HTTP clients, so
tests can substitute in-memory implementations.
"""

from typing import Protocol

from govfront.core.types import Artefact, DetailedGuidance, Section


class ContentRepository(Protocol):
    """Source of browse sections and the artefacts filed under them."""

    async def get_root_sections(self) -> list[Section]: ...

    async def get_section(self, slug: str) -> Section | None:
        """Return the section, or None if the content API doesn't know it."""
        ...

    async def get_sub_sections(self, parent_slug: str) -> list[Section]: ...

    async def get_artefacts(self, section_slug: str) -> list[Artefact]: ...


class DetailedGuidanceRepository(Protocol):
    """Source of detailed guidance categories filed under a sub-section."""

    async def get_sub_sections(self, tag_slug: str) -> list[DetailedGuidance]: ...


class NullDetailedGuidance:
    """Detailed guidance source used when no endpoint is configured."""

    async def get_sub_sections(self, tag_slug: str) -> list[DetailedGuidance]:
        return []
