"""Shared test fixtures."""

import pytest
from govfront.config import (
    Config,
    ContentApiConfig,
    DetailedGuidanceConfig,
    ServerConfig,
    WebsiteConfig,
)

from tests.fakes import WEBSITE_ROOT, FakeContentRepository, FakeDetailedGuidance


@pytest.fixture
def test_config() -> Config:
    """Create a test configuration pointing at a fake content API."""
    return Config(
        server=ServerConfig(),
        content_api=ContentApiConfig(endpoint="http://contentapi.test.gov.uk"),
        detailed_guidance=DetailedGuidanceConfig(),
        website=WebsiteConfig(root=WEBSITE_ROOT),
    )


@pytest.fixture
def content() -> FakeContentRepository:
    return FakeContentRepository()


@pytest.fixture
def detailed_guidance() -> FakeDetailedGuidance:
    return FakeDetailedGuidance()
