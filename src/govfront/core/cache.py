"""Cache-Control policy for browse responses."""

from enum import Enum

from aiohttp import web


class CachePolicy(Enum):
    """Caching policy for a terminal response state.

    Each member's value is (name, max-age in seconds). Both not-found
    outcomes share a max-age but stay distinct so callers can tell them apart.
    """

    SUCCESS = ("success", 1800)
    NOT_FOUND_INVALID_INPUT = ("not_found_invalid_input", 600)
    NOT_FOUND_UPSTREAM = ("not_found_upstream", 600)

    @property
    def max_age(self) -> int:
        return self.value[1]

    @property
    def header_value(self) -> str:
        """Value for the Cache-Control header."""
        return cache_control(self.max_age)


def cache_control(max_age: int) -> str:
    return f"max-age={max_age}, public"


def cacheable_not_found(policy: CachePolicy) -> web.HTTPNotFound:
    """Create a 404 response carrying the policy's Cache-Control header.

    Args:
        policy: One of the not-found policies

    Returns:
        HTTPNotFound ready to be raised from a handler
    """
    return web.HTTPNotFound(headers={"Cache-Control": policy.header_value})
