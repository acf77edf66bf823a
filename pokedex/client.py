"""A caching client for the parts of the PokeAPI the pokédex uses."""

from __future__ import annotations

import json
import logging
import urllib.request
from collections.abc import Callable
from typing import Any, TypeVar

from pokedex.cache import Cache
from pokedex.models import LocationArea, LocationPage, Pokemon

log = logging.getLogger(__name__)

BASE_URL = "https://pokeapi.co/api/v2"

Fetch = Callable[[str, float], bytes]
T = TypeVar("T")


class PokeAPIError(Exception):
    """Raised when a request fails or its answer cannot be understood."""


def _http_fetch(url: str, timeout: float) -> bytes:
    request = urllib.request.Request(url, headers={"Accept": "application/json"})
    with urllib.request.urlopen(request, timeout=timeout) as response:
        return response.read()


class Client:
    """Fetches PokeAPI documents, keeping raw responses in a time-expiring cache.

    ``fetch`` is called as ``fetch(url, timeout)`` and returns the response
    body; by default it performs an HTTP GET.
    """

    def __init__(
        self,
        timeout: float = 5.0,
        cache_interval: float = 300.0,
        fetch: Fetch | None = None,
    ) -> None:
        self.timeout = timeout
        self._cache = Cache(cache_interval)
        self._fetch = fetch if fetch is not None else _http_fetch

    def location(self, location_name: str) -> LocationArea:
        """Return the details of one location area."""
        return self._get(f"{BASE_URL}/location-area/{location_name}", LocationArea.from_dict)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas: the first one, or the one at ``page_url``."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._get(url, LocationPage.from_dict)

    def get_pokemon(self, name: str) -> Pokemon:
        """Return the description of one pokémon."""
        return self._get(f"{BASE_URL}/pokemon/{name}", Pokemon.from_dict)

    def close(self) -> None:
        """Stop the cache's background reaper."""
        self._cache.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get(self, url: str, parse: Callable[[Any], T]) -> T:
        cached = self._cache.get(url)
        if cached is not None:
            log.debug("Loading data from cache...")
            return self._parse(url, cached, parse)

        try:
            data = self._fetch(url, self.timeout)
        except (OSError, ValueError) as exc:
            raise PokeAPIError(f"request to {url} failed: {exc}") from exc

        result = self._parse(url, data, parse)
        self._cache.add(url, data)
        log.debug("Saved data to cache (%d)...", len(self._cache))
        return result

    @staticmethod
    def _parse(url: str, data: bytes, parse: Callable[[Any], T]) -> T:
        try:
            return parse(json.loads(data))
        except ValueError as exc:
            raise PokeAPIError(f"invalid response from {url}: {exc}") from exc