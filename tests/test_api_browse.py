"""Tests for browse page endpoints."""

from typing import Any

import pytest
from aiohttp import web
from govfront.config import Config
from govfront.core.types import DetailedGuidance
from govfront.server import create_app

from tests.fakes import (
    FakeContentRepository,
    FakeDetailedGuidance,
    make_artefact,
    make_section,
)

# Raw path segments that must never reach the content API
INVALID_SLUGS = [
    "this%20&%20that",
    "fco%A0",  # Invalid UTF-8
    "br54ba%9CAQ%C4%FD%928owse",  # Malformed UTF-8
    "%E9%F3(%E9%F3ges",  # Differently malformed UTF-8
]


@pytest.fixture
def app(
    test_config: Config,
    content: FakeContentRepository,
    detailed_guidance: FakeDetailedGuidance,
) -> web.Application:
    return create_app(test_config, content=content, detailed_guidance=detailed_guidance)


def _crime_and_justice_judges(content: FakeContentRepository) -> None:
    parent = make_section("crime-and-justice")
    content.has_section(parent)
    content.has_section(make_section("crime-and-justice/judges", parent=parent))
    content.has_artefacts("crime-and-justice/judges", [make_artefact("judge-dredd")])


class TestGetIndex:
    """Tests for GET /browse."""

    @pytest.mark.asyncio
    async def test__root_sections__lists_all_categories(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """List every root section linked to its browse page."""
        content.has_root_sections([make_section("crime-and-justice")])

        client = await aiohttp_client(app)
        response = await client.get("/browse")

        assert response.status == 200
        body = await response.text()
        assert '<h2><a href="/browse/crime-and-justice">Crime and justice</a></h2>' in body
        assert "text/html" in response.headers["Content-Type"]

    @pytest.mark.asyncio
    async def test__response__sets_slimmer_format(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Tag the response with the browse layout format."""
        content.has_root_sections([make_section("crime-and-justice")])

        client = await aiohttp_client(app)
        response = await client.get("/browse")

        assert response.headers["X-Slimmer-Format"] == "browse"

    @pytest.mark.asyncio
    async def test__response__sets_expiry_headers(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Cache successful listings for 30 minutes."""
        content.has_root_sections([make_section("crime-and-justice")])

        client = await aiohttp_client(app)
        response = await client.get("/browse")

        assert response.headers["Cache-Control"] == "max-age=1800, public"

    @pytest.mark.asyncio
    async def test__unescaped_description__is_escaped(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Escape HTML in descriptions from the content API."""
        content.has_root_sections(
            [
                make_section(
                    "education",
                    title="Education and learning",
                    description="Get help & support.",
                )
            ]
        )

        client = await aiohttp_client(app)
        response = await client.get("/browse")

        assert response.status == 200
        body = await response.text()
        assert "Get help &amp; support." in body


class TestGetSection:
    """Tests for GET /browse/{section}."""

    @pytest.mark.asyncio
    async def test__existing_section__lists_sub_sections(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Render the section title and link each sub-section."""
        content.has_section(make_section("crime-and-justice"))
        content.has_sub_sections("crime-and-justice", [make_section("alpha")])

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice")

        assert response.status == 200
        body = await response.text()
        assert "<h1>Crime and justice</h1>" in body
        assert '<h2><a href="/browse/alpha">Alpha</a></h2>' in body

    @pytest.mark.asyncio
    async def test__missing_section__returns_cacheable_404(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Return 404 when the content API doesn't know the section."""
        client = await aiohttp_client(app)
        response = await client.get("/browse/banana")

        assert response.status == 404
        assert response.headers["Cache-Control"] == "max-age=600, public"
        assert content.calls == [("get_section", "banana")]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", INVALID_SLUGS)
    async def test__invalid_slug__returns_cacheable_404_without_upstream_call(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
        slug: str,
    ) -> None:
        """Reject invalid section slugs before calling the content API."""
        client = await aiohttp_client(app)
        response = await client.get(f"/browse/{slug}")

        assert response.status == 404
        assert response.headers["Cache-Control"] == "max-age=600, public"
        assert content.calls == []

    @pytest.mark.asyncio
    async def test__response__sets_slimmer_format_and_expiry(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Tag the response with the browse format and cache it for 30 minutes."""
        content.has_section(make_section("crime-and-justice"))
        content.has_sub_sections("crime-and-justice", [make_section("alpha")])

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice")

        assert response.headers["X-Slimmer-Format"] == "browse"
        assert response.headers["Cache-Control"] == "max-age=1800, public"

    @pytest.mark.asyncio
    async def test__unescaped_section_description__is_escaped(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Escape HTML in the section description."""
        content.has_section(
            make_section(
                "education",
                title="Education and learning",
                description="Get help & support.",
            )
        )
        content.has_sub_sections("education", [make_section("alpha")])

        client = await aiohttp_client(app)
        response = await client.get("/browse/education")

        assert response.status == 200
        body = await response.text()
        assert "Get help &amp; support." in body

    @pytest.mark.asyncio
    async def test__unescaped_sub_section_description__is_escaped(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Escape HTML in sub-section descriptions."""
        content.has_section(make_section("education"))
        content.has_sub_sections(
            "education",
            [
                make_section(
                    "education/science",
                    title="For science!",
                    description="Science & education & other good things.",
                )
            ],
        )

        client = await aiohttp_client(app)
        response = await client.get("/browse/education")

        assert response.status == 200
        body = await response.text()
        assert "Science &amp; education &amp; other good things." in body
        assert '<a href="/browse/education/science">For science!</a>' in body


class TestGetSubSection:
    """Tests for GET /browse/{section}/{sub_section}."""

    @pytest.mark.asyncio
    async def test__existing_sub_section__lists_content(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Render the sub-section title and its artefacts."""
        _crime_and_justice_judges(content)

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice/judges")

        assert response.status == 200
        body = await response.text()
        assert "<h1>Judges</h1>" in body
        assert (
            '<li><h3><a href="http://www.test.gov.uk/judge-dredd">Judge dredd</a></h3>' in body
        )
        assert ("get_artefacts", "crime-and-justice/judges") in content.calls

    @pytest.mark.asyncio
    async def test__detailed_guidance__listed_in_sub_section(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
        detailed_guidance: FakeDetailedGuidance,
    ) -> None:
        """List detailed guidance categories filed under the sub-section."""
        _crime_and_justice_judges(content)
        detailed_guidance.entries["crime-and-justice/judges"] = [
            DetailedGuidance(
                title="Detailed guidance",
                web_url="http://example.com/browse/detailed-guidance",
                description="Lorem Ipsum Dolor Sit Amet",
            )
        ]

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice/judges")

        assert response.status == 200
        body = await response.text()
        guidance = body[body.index('<div class="detailed-guidance">') :]
        assert (
            '<li><a href="http://example.com/browse/detailed-guidance">Detailed guidance</a>'
            in guidance
        )
        assert "<p>Lorem Ipsum Dolor Sit Amet</p>" in guidance
        assert detailed_guidance.calls == ["crime-and-justice/judges"]

    @pytest.mark.asyncio
    async def test__no_detailed_guidance__omits_block(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Leave out the detailed guidance block when there is none."""
        _crime_and_justice_judges(content)

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice/judges")

        body = await response.text()
        assert "detailed-guidance" not in body

    @pytest.mark.asyncio
    async def test__missing_section__returns_cacheable_404(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Return 404 when neither section nor sub-section exist."""
        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice/frume")

        assert response.status == 404
        assert response.headers["Cache-Control"] == "max-age=600, public"

    @pytest.mark.asyncio
    async def test__missing_sub_section__returns_404(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
        detailed_guidance: FakeDetailedGuidance,
    ) -> None:
        """Return 404 when only the parent section exists."""
        content.has_section(make_section("crime-and-justice"))

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice/frume")

        assert response.status == 404
        assert content.calls == [("get_section", "crime-and-justice/frume")]
        assert detailed_guidance.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", INVALID_SLUGS)
    async def test__invalid_section_slug__returns_cacheable_404_without_upstream_call(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
        detailed_guidance: FakeDetailedGuidance,
        slug: str,
    ) -> None:
        """Reject an invalid section slug before calling any API."""
        client = await aiohttp_client(app)
        response = await client.get(f"/browse/{slug}/foo")

        assert response.status == 404
        assert response.headers["Cache-Control"] == "max-age=600, public"
        assert content.calls == []
        assert detailed_guidance.calls == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("slug", INVALID_SLUGS)
    async def test__invalid_sub_section_slug__returns_cacheable_404_without_upstream_call(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
        detailed_guidance: FakeDetailedGuidance,
        slug: str,
    ) -> None:
        """Reject an invalid sub-section slug before calling any API."""
        client = await aiohttp_client(app)
        response = await client.get(f"/browse/foo/{slug}")

        assert response.status == 404
        assert response.headers["Cache-Control"] == "max-age=600, public"
        assert content.calls == []
        assert detailed_guidance.calls == []

    @pytest.mark.asyncio
    async def test__response__sets_slimmer_format_and_expiry(
        self,
        aiohttp_client: Any,
        app: web.Application,
        content: FakeContentRepository,
    ) -> None:
        """Tag the response with the browse format and cache it for 30 minutes."""
        _crime_and_justice_judges(content)

        client = await aiohttp_client(app)
        response = await client.get("/browse/crime-and-justice/judges")

        assert response.headers["X-Slimmer-Format"] == "browse"
        assert response.headers["Cache-Control"] == "max-age=1800, public"
