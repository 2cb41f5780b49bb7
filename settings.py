import json
import os

from kraken_futures import CfRestApiV3

DEFAULT_BASE_URL = 'https://futures.kraken.com/derivatives'


def load_config(path=None):
    """Load config.json, or build the same layout from the environment."""
    path = path or os.getenv('CONFIG_FILE', 'config.json')
    if os.path.exists(path):
        with open(path) as config_file:
            return json.load(config_file)

    return {
        'KEY': os.getenv('WEBHOOK_KEY'),
        'EXCHANGES': {
            'KRAKEN-FUTURES': {
                'ENABLED': True,
                'BASE_URL': os.getenv('KRAKEN_FUTURES_BASE_URL', DEFAULT_BASE_URL),
                'API_KEY': os.getenv('API_KEY'),
                'API_SECRET': os.getenv('API_SECRET'),
                'TIMEOUT': float(os.getenv('KRAKEN_FUTURES_TIMEOUT', 5)),
            }
        }
    }


def client_from_config(exchange_config):
    return CfRestApiV3(
        base_url=exchange_config.get('BASE_URL', DEFAULT_BASE_URL),
        api_key=exchange_config.get('API_KEY'),
        api_secret=exchange_config.get('API_SECRET'),
        timeout=exchange_config.get('TIMEOUT', 5)
    )
