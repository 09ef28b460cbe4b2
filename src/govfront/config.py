"""Configuration management for govfront.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, replace
from pathlib import Path

CONFIG_FILENAME = "govfront.toml"

DEFAULT_WEBSITE_ROOT = "http://www.dev.gov.uk"


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class ContentApiConfig:
    """Content API configuration."""

    endpoint: str | None = None
    timeout: float = 10.0


@dataclass
class DetailedGuidanceConfig:
    """Detailed guidance API configuration."""

    endpoint: str | None = None


@dataclass
class WebsiteConfig:
    """Public website configuration."""

    root: str = DEFAULT_WEBSITE_ROOT


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    content_api: ContentApiConfig
    detailed_guidance: DetailedGuidanceConfig
    website: WebsiteConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for govfront.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(
            server=ServerConfig(),
            content_api=ContentApiConfig(),
            detailed_guidance=DetailedGuidanceConfig(),
            website=WebsiteConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        return cls(
            server=cls._parse_server(data.get("server")),
            content_api=cls._parse_content_api(data.get("content_api")),
            detailed_guidance=cls._parse_detailed_guidance(data.get("detailed_guidance")),
            website=cls._parse_website(data.get("website")),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_content_api(cls, data: object) -> ContentApiConfig:
        """Parse content_api configuration section.

        Args:
            data: Raw content_api section data

        Returns:
            ContentApiConfig instance
        """
        if data is None:
            return ContentApiConfig()

        if not isinstance(data, dict):
            raise ValueError("content_api section must be a dictionary")

        endpoint = data.get("endpoint")
        if endpoint is not None and not isinstance(endpoint, str):
            raise ValueError("content_api.endpoint must be a string")

        timeout = data.get("timeout", 10.0)
        # bool is an int subclass; reject it explicitly
        if isinstance(timeout, bool) or not isinstance(timeout, int | float):
            raise ValueError("content_api.timeout must be a number")
        if timeout <= 0:
            raise ValueError("content_api.timeout must be positive")

        return ContentApiConfig(endpoint=endpoint, timeout=float(timeout))

    @classmethod
    def _parse_detailed_guidance(cls, data: object) -> DetailedGuidanceConfig:
        if data is None:
            return DetailedGuidanceConfig()

        if not isinstance(data, dict):
            raise ValueError("detailed_guidance section must be a dictionary")

        endpoint = data.get("endpoint")
        if endpoint is not None and not isinstance(endpoint, str):
            raise ValueError("detailed_guidance.endpoint must be a string")

        return DetailedGuidanceConfig(endpoint=endpoint)

    @classmethod
    def _parse_website(cls, data: object) -> WebsiteConfig:
        if data is None:
            return WebsiteConfig()

        if not isinstance(data, dict):
            raise ValueError("website section must be a dictionary")

        root = data.get("root", DEFAULT_WEBSITE_ROOT)
        if not isinstance(root, str):
            raise ValueError("website.root must be a string")

        return WebsiteConfig(root=root)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        content_api_endpoint: str | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            content_api_endpoint: Override content_api.endpoint

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        content_api = self.content_api
        if content_api_endpoint is not None:
            content_api = replace(self.content_api, endpoint=content_api_endpoint)

        return replace(self, server=server, content_api=content_api)
