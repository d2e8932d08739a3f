"""
Unit tests for the PokeAPI resource client.
"""

import pytest
import requests
from unittest.mock import patch, MagicMock

from services.client import FetchError, PokeApiClient, extract_id_from_resource_url

BASE = 'https://pokeapi.test/api/v2'


def _response(status=200, payload=None, json_error=None):
    resp = MagicMock()
    resp.status_code = status
    resp.ok = 200 <= status < 300
    resp.reason = 'OK' if resp.ok else 'Not Found'
    if json_error is not None:
        resp.json.side_effect = json_error
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def client():
    return PokeApiClient(base_url=BASE + '/', timeout=5)


class TestPaths:

    @patch("services.client.requests.get")
    def test_list_path_and_timeout(self, mock_get, client):
        mock_get.return_value = _response(payload={'count': 0, 'results': []})
        assert client.get_pokemon_list(20, 40) == {'count': 0, 'results': []}
        mock_get.assert_called_once_with(f"{BASE}/pokemon?limit=20&offset=40", timeout=5)

    @patch("services.client.requests.get")
    def test_detail_species_and_type_paths(self, mock_get, client):
        mock_get.return_value = _response(payload={})
        client.get_pokemon_detail(25)
        client.get_pokemon_species('pikachu')
        client.get_type_detail('electric')
        urls = [c.args[0] for c in mock_get.call_args_list]
        assert urls == [
            f"{BASE}/pokemon/25",
            f"{BASE}/pokemon-species/pikachu",
            f"{BASE}/type/electric",
        ]


class TestListArguments:

    @pytest.mark.parametrize("limit,offset", [(-1, 0), (10, -5), ('10', 0), (1.5, 0), (True, 0)])
    @patch("services.client.requests.get")
    def test_rejects_bad_page_args_without_request(self, mock_get, client, limit, offset):
        with pytest.raises(ValueError):
            client.get_pokemon_list(limit, offset)
        mock_get.assert_not_called()

    @patch("services.client.requests.get")
    def test_zero_is_allowed(self, mock_get, client):
        mock_get.return_value = _response(payload={'results': []})
        client.get_pokemon_list(0, 0)
        mock_get.assert_called_once()


class TestErrors:

    @patch("services.client.requests.get")
    def test_http_error_raises_fetch_error_with_status(self, mock_get, client):
        mock_get.return_value = _response(status=404)
        with pytest.raises(FetchError) as exc:
            client.get_type_detail('unknown-type')
        assert exc.value.status == 404
        assert exc.value.path == '/type/unknown-type'
        assert '404' in str(exc.value)

    @patch("services.client.requests.get")
    def test_transport_error_raises_fetch_error(self, mock_get, client):
        mock_get.side_effect = requests.ConnectionError("connection refused")
        with pytest.raises(FetchError) as exc:
            client.get_pokemon_species(25)
        assert exc.value.status is None
        assert exc.value.path == '/pokemon-species/25'
        assert isinstance(exc.value.cause, requests.ConnectionError)

    @patch("services.client.requests.get")
    def test_invalid_json_raises_fetch_error(self, mock_get, client):
        mock_get.return_value = _response(json_error=ValueError("Expecting value"))
        with pytest.raises(FetchError):
            client.get_pokemon_detail(25)

    @patch("services.client.requests.get")
    def test_no_retry(self, mock_get, client):
        mock_get.return_value = _response(status=500)
        with pytest.raises(FetchError):
            client.get_pokemon_detail(25)
        assert mock_get.call_count == 1


class TestExtractId:

    def test_trailing_slash(self):
        assert extract_id_from_resource_url('https://pokeapi.co/api/v2/pokemon/25/') == 25

    def test_without_trailing_slash(self):
        assert extract_id_from_resource_url('https://pokeapi.co/api/v2/pokemon/151') == 151

    def test_no_id(self):
        assert extract_id_from_resource_url('https://pokeapi.co/api/v2/type/fire/') is None
        assert extract_id_from_resource_url('') is None
