import json

from custom_http import HTTP
from kraken_futures import CfRestApiV3
from settings import DEFAULT_BASE_URL, client_from_config, load_config


def test_load_config_file(tmp_path):
    path = tmp_path / 'config.json'
    path.write_text(json.dumps({
        'KEY': 'hook-key',
        'EXCHANGES': {'KRAKEN-FUTURES': {'ENABLED': False, 'BASE_URL': 'https://demo-futures.kraken.com/derivatives'}},
    }))

    config = load_config(str(path))

    assert config['KEY'] == 'hook-key'
    assert config['EXCHANGES']['KRAKEN-FUTURES']['ENABLED'] is False


def test_load_config_from_env_file(tmp_path, monkeypatch):
    path = tmp_path / 'other.json'
    path.write_text(json.dumps({'KEY': 'from-env-path', 'EXCHANGES': {}}))
    monkeypatch.setenv('CONFIG_FILE', str(path))

    assert load_config()['KEY'] == 'from-env-path'


def test_load_config_falls_back_to_environment(tmp_path, monkeypatch):
    monkeypatch.setenv('API_KEY', 'env-key')
    monkeypatch.setenv('API_SECRET', 'c2VjcmV0')
    monkeypatch.setenv('WEBHOOK_KEY', 'hook')
    monkeypatch.setenv('KRAKEN_FUTURES_TIMEOUT', '2.5')
    monkeypatch.delenv('KRAKEN_FUTURES_BASE_URL', raising=False)

    config = load_config(str(tmp_path / 'missing.json'))
    kraken = config['EXCHANGES']['KRAKEN-FUTURES']

    assert config['KEY'] == 'hook'
    assert kraken['ENABLED'] is True
    assert kraken['BASE_URL'] == DEFAULT_BASE_URL
    assert kraken['API_KEY'] == 'env-key'
    assert kraken['TIMEOUT'] == 2.5


def test_client_from_config():
    client = client_from_config({
        'BASE_URL': 'https://demo-futures.kraken.com/derivatives',
        'API_KEY': 'k',
        'API_SECRET': 'c2VjcmV0',
        'TIMEOUT': 4,
    })

    assert isinstance(client, CfRestApiV3)
    assert isinstance(client.session, HTTP)
    assert client.session.endpoint == 'https://demo-futures.kraken.com/derivatives'
    assert client.session.api_key == 'k'
    assert client.session.timeout == 4
