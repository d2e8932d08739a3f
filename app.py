import logging
import os
from flask import Flask

from views.pokedex import bp as pokedex_bp
from services.client import PokeApiClient
from services.core import CLEANUP_INTERVAL
from services.name_cache import LocalizationCache, start_cache_cleanup
from services.names import NameResolver

logging.basicConfig(
    level=(os.environ.get('LOG_LEVEL') or 'INFO').upper(),
    format='%(asctime)s %(levelname)s %(name)s: %(message)s',
)


def create_app(resolver: NameResolver = None) -> Flask:
    app = Flask(__name__)
    app.json.ensure_ascii = False
    app.json.sort_keys = False

    # One name cache per app; views reach it through the resolver
    if resolver is None:
        resolver = NameResolver(PokeApiClient(), LocalizationCache())
    app.extensions['name_resolver'] = resolver
    app.extensions['name_cache_cleanup'] = None

    app.register_blueprint(pokedex_bp)

    # Start the periodic cache sweep once, on the first incoming request
    @app.before_request
    def _schedule_cleanup():
        if app.extensions['name_cache_cleanup'] is None:
            app.extensions['name_cache_cleanup'] = start_cache_cleanup(resolver.cache, CLEANUP_INTERVAL)

    return app


app = create_app()


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(host='0.0.0.0', port=port, debug=True)
