from .names import STAT_NAMES

# Type background colours (hex)
TYPE_COLORS = {
    'normal': '#9CA3AF',
    'fighting': '#DC2626',
    'flying': '#818CF8',
    'poison': '#A855F7',
    'ground': '#CA8A04',
    'rock': '#854D0E',
    'bug': '#4ADE80',
    'ghost': '#6B21A8',
    'steel': '#6B7280',
    'fire': '#EF4444',
    'water': '#3B82F6',
    'grass': '#22C55E',
    'electric': '#FACC15',
    'psychic': '#EC4899',
    'ice': '#93C5FD',
    'dragon': '#4338CA',
    'dark': '#1F2937',
    'fairy': '#FBCFE8',
}
DEFAULT_TYPE_COLOR = '#F3F4F6'


def get_type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def get_stat_name(stat_name: str) -> str:
    return STAT_NAMES.lookup(stat_name)


def get_stat_max_value(stat_name: str) -> int:
    # Rough ceilings for the stat bars
    return 255 if stat_name == 'hp' else 200


def get_stat_color(value: int, max_value: int) -> str:
    """Bar colour by how full the bar is: green >= 80%, blue >= 60%, yellow >= 40%, else red."""
    percentage = (value / max_value) * 100 if max_value else 0
    if percentage >= 80:
        return '#22C55E'
    if percentage >= 60:
        return '#3B82F6'
    if percentage >= 40:
        return '#FACC15'
    return '#EF4444'


def format_pokemon_id(poke_id: int) -> str:
    return str(poke_id).zfill(3)


def capitalize_first_letter(s: str) -> str:
    return s[:1].upper() + s[1:]


def pick_artwork(sprites) -> str:
    """Official artwork when present, else the default front sprite."""
    sprites = sprites or {}
    art = ((sprites.get('other') or {}).get('official-artwork') or {}).get('front_default')
    return art or sprites.get('front_default') or ''


def build_stats(stats):
    """Turn a detail record's ``stats[]`` into labelled rows for the stat bars."""
    rows = []
    for s in stats or []:
        key = (s.get('stat') or {}).get('name') or ''
        value = s.get('base_stat') or 0
        max_value = get_stat_max_value(key)
        rows.append({
            'key': key,
            'label': get_stat_name(key),
            'value': value,
            'max': max_value,
            'color': get_stat_color(value, max_value),
        })
    return rows
