from flask import Blueprint, jsonify, request, current_app

from services.client import FetchError
from services.core import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from services.display import build_stats, format_pokemon_id, get_type_color, pick_artwork
from services.text_utils import matches_search

bp = Blueprint('pokedex', __name__, url_prefix='/api')


def _resolver():
    return current_app.extensions['name_resolver']


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == '':
        return default
    value = int(raw)
    if value < 0:
        raise ValueError(f"{name} must be non-negative")
    return value


def _fetch_error_response(e: FetchError):
    status = 404 if e.status == 404 else 502
    return jsonify({'error': str(e)}), status


@bp.route('/pokemon')
def pokemon_list():
    try:
        limit = min(_int_arg('limit', DEFAULT_PAGE_SIZE), MAX_PAGE_SIZE)
        offset = _int_arg('offset', 0)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    try:
        page = _resolver().pokemon_page(limit, offset)
    except FetchError as e:
        return _fetch_error_response(e)
    q = (request.args.get('q') or '').strip()
    results = page['results']
    if q:
        results = [p for p in results if matches_search(q, p['name'], p['japanese_name'])]
    count = page['count']
    return jsonify({
        'count': count,
        'results': results,
        'next_offset': offset + limit if page.get('next') else None,
        'previous_offset': max(offset - limit, 0) if page.get('previous') else None,
    })


@bp.route('/pokemon/<id_or_name>')
def pokemon_detail(id_or_name):
    resolver = _resolver()
    key = id_or_name.lower()
    try:
        detail = resolver.pokemon_detail_with_name(key)
    except FetchError as e:
        return _fetch_error_response(e)
    type_keys = [(t.get('type') or {}).get('name') for t in detail.get('types') or []]
    type_keys = [t for t in type_keys if t]
    type_names = resolver.type_names(type_keys)
    return jsonify({
        'id': detail.get('id'),
        'display_id': format_pokemon_id(detail.get('id') or 0),
        'name': detail.get('name'),
        'japanese_name': detail['japanese_name'],
        'height': detail.get('height'),
        'weight': detail.get('weight'),
        'artwork': pick_artwork(detail.get('sprites')),
        'types': type_keys,
        'type_names': type_names,
        'type_colors': {t: get_type_color(t) for t in type_keys},
        'stats': build_stats(detail.get('stats')),
        'abilities': [
            {'name': (a.get('ability') or {}).get('name'), 'is_hidden': bool(a.get('is_hidden'))}
            for a in detail.get('abilities') or []
        ],
    })


@bp.route('/pokemon/<id_or_name>/name')
def pokemon_name(id_or_name):
    key = id_or_name.lower()
    return jsonify({'key': key, 'name': _resolver().pokemon_name(key)})


@bp.route('/types/<type_name>')
def type_name(type_name):
    key = type_name.lower()
    return jsonify({
        'type': key,
        'name': _resolver().type_name(key),
        'color': get_type_color(key),
    })
