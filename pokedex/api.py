"""HTTP client for the Pokémon web API with a response cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from datetime import timedelta
from typing import Any, Callable, TypeVar

from .cache import Cache
from .models import LocationArea, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

Fetcher = Callable[[str, float], bytes]
_T = TypeVar("_T")


class ApiError(Exception):
    """Raised when a resource cannot be fetched or decoded."""


def _urlopen_fetch(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        raise ApiError(f"{url}: HTTP {exc.code} {exc.reason}") from exc
    except (urllib.error.URLError, OSError) as exc:
        raise ApiError(f"{url}: {exc}") from exc


class Client:
    """Fetches API resources, keeping raw responses in a timed cache."""

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: timedelta | float = timedelta(minutes=5),
        *,
        fetch: Fetcher | None = None,
    ) -> None:
        self.timeout = float(timeout)
        self._cache = Cache(cache_interval)
        self._fetch = fetch or _urlopen_fetch

    def _get(self, url: str, parse: Callable[[Any], _T]) -> _T:
        cached = self._cache.get(url)
        if cached is not None:
            return self._decode(url, cached, parse)
        body = self._fetch(url, self.timeout)
        result = self._decode(url, body, parse)
        self._cache.add(url, body)
        return result

    @staticmethod
    def _decode(url: str, body: bytes, parse: Callable[[Any], _T]) -> _T:
        try:
            return parse(json.loads(body))
        except (ValueError, TypeError) as exc:
            raise ApiError(f"{url}: invalid response: {exc}") from exc

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page if no URL is given."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._get(url, LocationPage.from_dict)

    def list_pokemon(self, location: str) -> LocationArea:
        """Return the location area with the Pokémon found there."""
        return self._get(f"{BASE_URL}/location-area/{location}", LocationArea.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the Pokémon with the given name."""
        return self._get(f"{BASE_URL}/pokemon/{name}", Pokemon.from_dict)

    def close(self) -> None:
        """Stop the cache's background reaper."""
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()