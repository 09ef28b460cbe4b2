"""Application keys for type-safe app configuration access."""

import httpx
from aiohttp import web

from govfront.content_api import ContentRepository, DetailedGuidanceRepository
from govfront.core.renderer import BrowseRenderer

content_key = web.AppKey("content", ContentRepository)
detailed_guidance_key = web.AppKey("detailed_guidance", DetailedGuidanceRepository)
renderer_key = web.AppKey("renderer", BrowseRenderer)
http_client_key = web.AppKey("http_client", httpx.AsyncClient)
