import os
from concurrent.futures import ThreadPoolExecutor

# Constants (overridable from the environment)
POKEAPI_BASE = os.environ.get('POKEAPI_BASE') or 'https://pokeapi.co/api/v2'
REQUEST_TIMEOUT = float(os.environ.get('POKEAPI_TIMEOUT') or 12)
TARGET_LANG = (os.environ.get('POKEDEX_LANG') or 'ja').lower()

# Name cache lifetimes, in seconds
DEFAULT_TTL = float(os.environ.get('NAME_CACHE_TTL') or 24 * 60 * 60)
FALLBACK_TTL = float(os.environ.get('NAME_CACHE_FALLBACK_TTL') or 60 * 60)
CLEANUP_INTERVAL = float(os.environ.get('NAME_CACHE_CLEANUP_INTERVAL') or 10 * 60)

# Page size bounds for the list endpoint
DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200

# Thread pool for parallel name lookups (bounded to be polite to PokeAPI)
EXECUTOR = ThreadPoolExecutor(max_workers=8)
