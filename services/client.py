import logging
import re

import requests

from .core import POKEAPI_BASE, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)

_RESOURCE_ID_RE = re.compile(r'/pokemon/(\d+)/?$')


class FetchError(Exception):
    """A PokeAPI request failed.

    ``status`` is the HTTP status for non-2xx responses and ``None`` for
    transport or JSON decoding failures.
    """

    def __init__(self, path: str, status=None, cause=None):
        self.path = path
        self.status = status
        self.cause = cause
        detail = f"HTTP {status}" if status is not None else (str(cause) if cause else 'request failed')
        super().__init__(f"PokeAPI error: {detail} ({path})")


def _check_page_arg(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class PokeApiClient:
    """Read-only client for the four PokeAPI resources the Pokédex uses."""

    def __init__(self, base_url: str = POKEAPI_BASE, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _get(self, path: str) -> dict:
        url = f"{self.base_url}{path}"
        try:
            r = requests.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("PokeAPI fetch error for path %s: %s", path, e)
            raise FetchError(path, cause=e) from e
        if not r.ok:
            logger.error("PokeAPI request failed: %s %s for path: %s", r.status_code, r.reason, path)
            raise FetchError(path, status=r.status_code)
        try:
            return r.json()
        except ValueError as e:
            logger.error("PokeAPI returned invalid JSON for path %s: %s", path, e)
            raise FetchError(path, status=r.status_code, cause=e) from e

    def get_pokemon_list(self, limit: int, offset: int = 0) -> dict:
        """Return one page of ``/pokemon``: ``{count, next, previous, results}``."""
        limit = _check_page_arg('limit', limit)
        offset = _check_page_arg('offset', offset)
        return self._get(f"/pokemon?limit={limit}&offset={offset}")

    def get_pokemon_detail(self, id_or_name) -> dict:
        return self._get(f"/pokemon/{id_or_name}")

    def get_pokemon_species(self, id_or_name) -> dict:
        return self._get(f"/pokemon-species/{id_or_name}")

    def get_type_detail(self, id_or_name) -> dict:
        return self._get(f"/type/{id_or_name}")


def extract_id_from_resource_url(url: str):
    """Pull the numeric id out of a list result URL (``/pokemon/25/`` -> 25)."""
    m = _RESOURCE_ID_RE.search(url or '')
    return int(m.group(1)) if m else None
