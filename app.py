import hmac
import logging
import os

from flask import Flask, request

from kraken_handler import handle_kraken_request
from settings import client_from_config, load_config

logger = logging.getLogger(__name__)

app = Flask(__name__)

# Load config.json
config = load_config()

exchanges = {}


def is_exchange_enabled(exchange_name):
    """Check if the exchange is enabled in the config."""
    return exchange_name in config['EXCHANGES'] and config['EXCHANGES'][exchange_name]['ENABLED']


def initialize_exchanges():
    """Initialize enabled exchanges."""
    if is_exchange_enabled('KRAKEN-FUTURES'):
        logger.info("Kraken Futures is enabled!")
        exchanges['kraken-futures'] = client_from_config(config['EXCHANGES']['KRAKEN-FUTURES'])


initialize_exchanges()


def get_exchange(name):
    exchange = exchanges.get(name)
    if not exchange:
        raise ValueError(f"{name} is not enabled in the config file.")
    return exchange


def handle_error(e):
    """Handle exceptions and return a response with an error message."""
    logger.warning("Request failed: %s", e)
    return {"status": "error", "message": str(e)}, 400 if isinstance(e, (ValueError, KeyError)) else 500


@app.route('/example', methods=['GET'])
def example():
    """Return the account summary of the configured Kraken Futures account."""
    try:
        accounts = get_exchange('kraken-futures').get_accounts()
        return {"status": "success", "data": accounts}, 200
    except Exception as e:
        return handle_error(e)


@app.route('/webhook', methods=['POST'])
def webhook():
    """Handle incoming webhook requests."""
    logger.info("Hook Received!")
    data = request.get_json(force=True, silent=True)

    if not data or not isinstance(data, dict):
        return {"status": "error", "message": "No data provided"}, 400

    if config.get('KEY') is None or 'key' not in data \
            or not hmac.compare_digest(str(data['key']).encode('utf-8'), str(config['KEY']).encode('utf-8')):
        error_message = "Invalid Key, Please Try Again!"
        logger.warning(error_message)
        return {
            "status": "error",
            "message": error_message
        }, 400

    try:
        exchange = get_exchange(data.get('exchange', 'kraken-futures'))
        response = handle_kraken_request(exchange, data)
        return {"status": "success", "data": response}, 200

    except Exception as e:
        return handle_error(e)


if __name__ == '__main__':
    logging.basicConfig(level=os.getenv('LOG_LEVEL', 'INFO'))
    app.run(host=os.getenv('FLASK_HOST', '0.0.0.0'), port=int(os.getenv('FLASK_PORT', 5000)))
