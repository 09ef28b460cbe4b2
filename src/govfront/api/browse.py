"""Browse pages.

Lists sections, sub-sections and the artefacts filed under them. Path
segments are validated before any content API call; invalid segments and
content the API doesn't know both end in a cacheable 404.
"""

import logging

from aiohttp import web

from govfront.app_keys import content_key, detailed_guidance_key, renderer_key
from govfront.core.cache import CachePolicy, cacheable_not_found
from govfront.core.slugs import join_slugs, validate_slugs
from govfront.core.types import RENDER_FORMAT

logger = logging.getLogger(__name__)


def create_browse_routes() -> list[web.RouteDef]:
    return [
        web.get("/browse", get_index),
        web.get("/browse/{section}", get_section),
        web.get("/browse/{section}/{sub_section}", get_sub_section),
    ]


async def get_index(request: web.Request) -> web.Response:
    content = request.app[content_key]
    renderer = request.app[renderer_key]

    sections = await content.get_root_sections()
    return _browse_response(renderer.render_index(sections))


async def get_section(request: web.Request) -> web.Response:
    slug = request.match_info["section"]
    _require_valid_slugs(slug)

    content = request.app[content_key]
    renderer = request.app[renderer_key]

    section = await content.get_section(slug)
    if section is None:
        logger.info(f"Section not found: {slug}")
        raise cacheable_not_found(CachePolicy.NOT_FOUND_UPSTREAM)

    sub_sections = await content.get_sub_sections(slug)
    return _browse_response(renderer.render_section(section, sub_sections))


async def get_sub_section(request: web.Request) -> web.Response:
    section_slug = request.match_info["section"]
    sub_section_slug = request.match_info["sub_section"]
    _require_valid_slugs(section_slug, sub_section_slug)

    content = request.app[content_key]
    detailed_guidance = request.app[detailed_guidance_key]
    renderer = request.app[renderer_key]

    tag = join_slugs(section_slug, sub_section_slug)
    section = await content.get_section(tag)
    if section is None:
        logger.info(f"Sub section not found: {tag}")
        raise cacheable_not_found(CachePolicy.NOT_FOUND_UPSTREAM)

    artefacts = await content.get_artefacts(tag)
    guidance = await detailed_guidance.get_sub_sections(tag)
    return _browse_response(renderer.render_sub_section(section, artefacts, guidance))


def _require_valid_slugs(*slugs: str) -> None:
    """Short-circuit with a cacheable 404 unless every slug is valid.

    Raises:
        web.HTTPNotFound: If any slug is invalid
    """
    if not validate_slugs(*slugs):
        logger.debug(f"Rejected invalid slug in {slugs!r}")
        raise cacheable_not_found(CachePolicy.NOT_FOUND_INVALID_INPUT)


def _browse_response(body: str) -> web.Response:
    return web.Response(
        text=body,
        content_type="text/html",
        headers={
            "X-Slimmer-Format": RENDER_FORMAT,
            "Cache-Control": CachePolicy.SUCCESS.header_value,
        },
    )
