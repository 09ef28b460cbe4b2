"""aiohttp server for govfront.

Application factory and route registration.
"""

import logging

import httpx
from aiohttp import web

from govfront.api.browse import create_browse_routes
from govfront.app_keys import (
    content_key,
    detailed_guidance_key,
    http_client_key,
    renderer_key,
)
from govfront.config import Config
from govfront.content_api import (
    ContentApiClient,
    ContentRepository,
    DetailedGuidanceClient,
    DetailedGuidanceRepository,
    NullDetailedGuidance,
)
from govfront.core.renderer import BrowseRenderer

logger = logging.getLogger(__name__)


def create_app(
    config: Config,
    *,
    content: ContentRepository | None = None,
    detailed_guidance: DetailedGuidanceRepository | None = None,
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        content: Content repository to use instead of the content API client
        detailed_guidance: Detailed guidance repository to use instead of
                           the one derived from config

    Returns:
        Configured aiohttp application

    Raises:
        ValueError: If no content repository is given and
                    content_api.endpoint is not configured
    """
    app = web.Application()

    if content is None or (detailed_guidance is None and config.detailed_guidance.endpoint):
        http_client = httpx.AsyncClient(timeout=config.content_api.timeout)
        app[http_client_key] = http_client
        app.on_cleanup.append(_close_http_client)

        if content is None:
            if not config.content_api.endpoint:
                raise ValueError("content_api.endpoint is required")
            content = ContentApiClient(http_client, config.content_api.endpoint)

        if detailed_guidance is None and config.detailed_guidance.endpoint:
            detailed_guidance = DetailedGuidanceClient(
                http_client, config.detailed_guidance.endpoint
            )

    app[content_key] = content
    app[detailed_guidance_key] = detailed_guidance or NullDetailedGuidance()
    app[renderer_key] = BrowseRenderer(config.website.root)

    app.router.add_routes(create_browse_routes())

    return app


async def _close_http_client(app: web.Application) -> None:
    """Close the shared HTTP client on application cleanup."""
    await app[http_client_key].aclose()


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving browse pages on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
