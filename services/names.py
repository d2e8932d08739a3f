from collections.abc import Mapping

from .client import PokeApiClient, extract_id_from_resource_url
from .core import EXECUTOR, TARGET_LANG
from .name_cache import LocalizationCache


class FallbackTable(Mapping):
    """Read-only English identifier -> Japanese display string table.

    ``lookup(key, default)`` returns the mapped string, else ``default``,
    else the key itself, so callers always get something printable.
    """

    def __init__(self, entries):
        self._entries = dict(entries)

    def __getitem__(self, key):
        return self._entries[key]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def lookup(self, key, default=None) -> str:
        if key in self._entries:
            return self._entries[key]
        if default is not None:
            return default
        return str(key)


TYPE_NAMES = FallbackTable({
    'normal': 'ノーマル',
    'fighting': 'かくとう',
    'flying': 'ひこう',
    'poison': 'どく',
    'ground': 'じめん',
    'rock': 'いわ',
    'bug': 'むし',
    'ghost': 'ゴースト',
    'steel': 'はがね',
    'fire': 'ほのお',
    'water': 'みず',
    'grass': 'くさ',
    'electric': 'でんき',
    'psychic': 'エスパー',
    'ice': 'こおり',
    'dragon': 'ドラゴン',
    'dark': 'あく',
    'fairy': 'フェアリー',
})

STAT_NAMES = FallbackTable({
    'hp': 'HP',
    'attack': 'こうげき',
    'defense': 'ぼうぎょ',
    'special-attack': 'とくこう',
    'special-defense': 'とくぼう',
    'speed': 'すばやさ',
})


def find_localized_name(record, lang: str):
    """Return the ``names[]`` entry for ``lang`` from a species/type record, or None.
    Other languages are never substituted.
    """
    for entry in (record or {}).get('names') or []:
        lang_code = (entry.get('language') or {}).get('name')
        if lang_code == lang and entry.get('name'):
            return entry['name']
    return None


def type_cache_key(type_name: str) -> str:
    # Prefixed so a type key never collides with a Pokémon id or name
    return f"type_{type_name}"


class NameResolver:
    """Localized Pokémon and type names: cache, then PokeAPI, then static tables."""

    def __init__(self, client: PokeApiClient, cache: LocalizationCache, lang: str = TARGET_LANG):
        self.client = client
        self.cache = cache
        self.lang = lang

    def pokemon_name(self, id_or_name) -> str:
        return self.cache.resolve(
            id_or_name,
            lambda: self.client.get_pokemon_species(id_or_name),
            lambda species: find_localized_name(species, self.lang),
            str(id_or_name),
        )

    def type_name(self, type_name: str) -> str:
        return self.cache.resolve(
            type_cache_key(type_name),
            lambda: self.client.get_type_detail(type_name),
            lambda detail: find_localized_name(detail, self.lang),
            TYPE_NAMES.lookup(type_name),
        )

    def type_names(self, type_names) -> dict:
        """Resolve several type names in parallel. Returns ``{english: localized}``."""
        names = list(dict.fromkeys(type_names or []))
        futures = {name: EXECUTOR.submit(self.type_name, name) for name in names}
        return {name: f.result() for name, f in futures.items()}

    def pokemon_detail_with_name(self, id_or_name) -> dict:
        """Detail record plus ``japanese_name``. A failed detail fetch raises FetchError."""
        name_future = EXECUTOR.submit(self.pokemon_name, id_or_name)
        detail = self.client.get_pokemon_detail(id_or_name)
        return {**detail, 'japanese_name': name_future.result()}

    def pokemon_page(self, limit: int, offset: int) -> dict:
        """One list page with each result's id and localized name filled in."""
        page = self.client.get_pokemon_list(limit, offset)
        results = page.get('results') or []
        keys = []
        for item in results:
            pid = extract_id_from_resource_url(item.get('url') or '')
            keys.append(pid if pid is not None else item.get('name'))
        futures = [EXECUTOR.submit(self.pokemon_name, k) for k in keys]
        rows = []
        for item, key, f in zip(results, keys, futures):
            rows.append({
                'id': key if isinstance(key, int) else None,
                'name': item.get('name'),
                'url': item.get('url'),
                'japanese_name': f.result(),
            })
        return {
            'count': page.get('count', 0),
            'next': page.get('next'),
            'previous': page.get('previous'),
            'results': rows,
        }
