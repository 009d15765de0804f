import re
from typing import Literal
from urllib.parse import urlsplit

from pydantic import BaseModel

from trainor.settings import settings

Strategy = Literal["StaleWhileRevalidate", "CacheFirst", "NetworkFirst"]

PRECACHE_GLOB_PATTERNS: tuple[str, ...] = (
    "**/*.{js,css,html,ico,png,svg,webp,woff,woff2}",
)

# Tried in order when a navigation request cannot reach the network
NAVIGATION_FALLBACKS: tuple[str, ...] = ("/offline", "/")

IMAGE_URL = re.compile(r"\.(?:png|jpg|jpeg|svg|gif|webp)$", re.IGNORECASE)


class CacheRule(BaseModel):
    name: str
    strategy: Strategy
    cache_name: str
    origin: str | None = None
    destination: str | None = None
    url_pattern: str | None = None
    url_contains: str | None = None

    def matches(self, url: str, destination: str | None = None) -> bool:
        """
        A rule matches when any one of its conditions holds.
        """
        if self.origin and _origin(url) == self.origin:
            return True
        if self.destination and destination == self.destination:
            return True
        path = urlsplit(url).path
        if self.url_pattern and re.search(self.url_pattern, path, re.IGNORECASE):
            return True
        if self.url_contains and self.url_contains in url:
            return True
        return False


def _origin(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc}".lower()


def runtime_rules(api_url: str | None = None) -> list[CacheRule]:
    """
    Runtime caching rules, first match wins.

    - Supabase API: serve cached copy immediately, revalidate in background
    - images/animations: cache first, only fetch on a miss
    """
    api_url = api_url if api_url is not None else settings.SUPABASE_URL
    rules = []

    if api_url:
        rules.append(
            CacheRule(
                name="api",
                strategy="StaleWhileRevalidate",
                cache_name="api-cache",
                origin=_origin(api_url),
            )
        )

    rules.append(
        CacheRule(
            name="media",
            strategy="CacheFirst",
            cache_name="media-cache",
            destination="image",
            url_pattern=IMAGE_URL.pattern,
            url_contains="lottie",
        )
    )
    return rules


def match_rule(
    url: str, destination: str | None = None, rules: list[CacheRule] | None = None
) -> CacheRule | None:
    for rule in rules if rules is not None else runtime_rules():
        if rule.matches(url, destination):
            return rule
    return None


def navigation_fallback(cached_paths) -> str | None:
    """
    Page to serve for an offline navigation, given the set of cached paths.
    """
    for path in NAVIGATION_FALLBACKS:
        if path in cached_paths:
            return path
    return None


def build_cache_policy() -> dict:
    return {
        "precache": list(PRECACHE_GLOB_PATTERNS),
        "runtime_caching": [
            rule.model_dump(exclude_none=True) for rule in runtime_rules()
        ],
        "navigation_fallbacks": list(NAVIGATION_FALLBACKS),
    }


def build_manifest() -> dict:
    return {
        "name": settings.APP_NAME,
        "short_name": settings.APP_SHORT_NAME,
        "description": settings.APP_DESCRIPTION,
        "theme_color": settings.THEME_COLOR,
        "background_color": settings.BACKGROUND_COLOR,
        "display": "standalone",
        "scope": "/",
        "start_url": "/",
        "icons": [
            {"src": "/icon-192.png", "sizes": "192x192", "type": "image/png"},
            {"src": "/icon-512.png", "sizes": "512x512", "type": "image/png"},
        ],
    }
