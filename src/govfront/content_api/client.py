"""Content API client for govfront.

This module provides async HTTP clients for the content API and the
detailed guidance API. Both speak the same tag-based JSON protocol.
"""

import logging
from typing import Any, NotRequired, TypedDict
from urllib.parse import quote

import httpx

from govfront.core.types import Artefact, DetailedGuidance, Section

logger = logging.getLogger(__name__)


# Content API Response TypedDicts


class TagDetailsDict(TypedDict):
    """Tag details block."""

    description: NotRequired[str | None]
    type: NotRequired[str]


class TagDict(TypedDict):
    """Content API tag."""

    id: str
    title: str
    slug: NotRequired[str]
    web_url: NotRequired[str | None]
    details: NotRequired[TagDetailsDict]
    parent: NotRequired["TagDict | None"]


class ResultsResponseDict(TypedDict):
    """Collection response wrapping a results list."""

    results: list[dict[str, Any]]
    total: NotRequired[int]


class _TagApiClient:
    """Shared request handling for tag-based APIs."""

    def __init__(self, client: httpx.AsyncClient, base_url: str):
        """Initialize client.

        Args:
            client: httpx AsyncClient used for all requests
            base_url: API base URL (e.g., https://contentapi.example.gov)
        """
        self.client = client
        self.base_url = base_url.rstrip("/")

    async def _get_json(
        self, path: str, params: dict[str, str] | None = None
    ) -> Any:
        """GET a JSON document.

        Args:
            path: Path relative to base_url, already URL-encoded
            params: Optional query parameters

        Returns:
            Decoded JSON body, or None if the API responded 404

        Raises:
            httpx.HTTPError: If request fails with any other error
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url} params={params}")
        response = await self.client.get(
            url,
            params=params,
            headers={"Accept": "application/json"},
        )
        if response.status_code == 404:
            logger.info(f"Not found upstream: {url}")
            return None
        if response.status_code >= 400:
            logger.error(f"Error response from {url}: {response.text}")
        response.raise_for_status()

        return response.json()

    async def _get_results(
        self, path: str, params: dict[str, str] | None = None
    ) -> list[Any]:
        data: ResultsResponseDict | None = await self._get_json(path, params)
        if data is None:
            return []
        return data.get("results", [])


class ContentApiClient(_TagApiClient):
    """Async HTTP client for the content API.

    Implements the ContentRepository protocol.
    """

    async def get_root_sections(self) -> list[Section]:
        """Get the top-level browse sections.

        Returns:
            Root sections in API order

        Raises:
            httpx.HTTPError: If request fails
        """
        logger.info("Getting root sections")
        tags: list[TagDict] = await self._get_results(
            "/tags.json", {"type": "section", "root_sections": "true"}
        )
        return [Section.from_dict(tag) for tag in tags]

    async def get_section(self, slug: str) -> Section | None:
        """Get a single section by slug.

        Args:
            slug: Section slug, e.g. "crime-and-justice/judges"

        Returns:
            Section, or None if the content API doesn't know it

        Raises:
            httpx.HTTPError: If request fails
        """
        logger.info(f"Getting section {slug}")
        data: TagDict | None = await self._get_json(f"/tags/{_encode_slug(slug)}.json")
        if data is None:
            return None
        return Section.from_dict(data)

    async def get_sub_sections(self, parent_slug: str) -> list[Section]:
        """Get the child sections of a section.

        Args:
            parent_slug: Slug of the parent section

        Returns:
            Child sections, empty if the parent is unknown

        Raises:
            httpx.HTTPError: If request fails
        """
        logger.info(f"Getting sub sections of {parent_slug}")
        tags: list[TagDict] = await self._get_results(
            "/tags.json", {"type": "section", "parent_id": parent_slug}
        )
        return [Section.from_dict(tag) for tag in tags]

    async def get_artefacts(self, section_slug: str) -> list[Artefact]:
        """Get the artefacts tagged with a section.

        Args:
            section_slug: Section slug

        Returns:
            Artefacts, empty if the section is unknown

        Raises:
            httpx.HTTPError: If request fails
        """
        logger.info(f"Getting artefacts in {section_slug}")
        results = await self._get_results("/with_tag.json", {"tag": section_slug})
        return [Artefact.from_dict(item) for item in results]


class DetailedGuidanceClient(_TagApiClient):
    """Async HTTP client for the detailed guidance API.

    Implements the DetailedGuidanceRepository protocol.
    """

    async def get_sub_sections(self, tag_slug: str) -> list[DetailedGuidance]:
        """Get detailed guidance categories filed under a browse tag.

        Args:
            tag_slug: Browse sub-section slug, e.g. "crime-and-justice/judges"

        Returns:
            Detailed guidance entries, empty if the tag is unknown

        Raises:
            httpx.HTTPError: If request fails
        """
        logger.info(f"Getting detailed guidance for {tag_slug}")
        results = await self._get_results(
            "/tags.json", {"type": "section", "parent_id": tag_slug}
        )
        return [DetailedGuidance.from_dict(item) for item in results]


def _encode_slug(slug: str) -> str:
    # Nested slugs are a single path segment: "a/b" -> "a%2Fb"
    return quote(slug, safe="")
