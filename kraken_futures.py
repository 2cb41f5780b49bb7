import json
import logging

from custom_http import HTTP

logger = logging.getLogger(__name__)


class CfRestApiV3:
    """Kraken Futures REST v3 client.

    Every method fires exactly one request and returns
    ``{'name': <operation>, 'body': <raw response text>}``. Status codes are
    not inspected; transport errors from ``requests`` propagate unchanged.
    """

    def __init__(self, base_url, api_key=None, api_secret=None, timeout=None, session=None):
        self.base_url = base_url
        self.session = session or HTTP(
            endpoint=base_url,
            api_key=api_key,
            api_secret=api_secret,
            timeout=timeout
        )

    def _call(self, name, method, path, params=None, data=None, auth=False):
        response = self.session.request(method, path, params=params, data=data, auth=auth)
        logger.debug("%s(): %s%s HTTP %s", name, self.base_url, path, response.status_code)
        return {'name': name, 'body': response.text}

    # public endpoints

    def get_instruments(self):
        return self._call('get_instruments', 'GET', '/api/v3/instruments')

    def get_tickers(self):
        return self._call('get_tickers', 'GET', '/api/v3/tickers')

    def get_orderbook(self, symbol):
        return self._call('get_orderbook', 'GET', '/api/v3/orderbook', params={'symbol': symbol})

    def get_history(self, symbol, last_time=None):
        params = {'symbol': symbol}
        if last_time:
            params['lastTime'] = last_time
        return self._call('get_history', 'GET', '/api/v3/history', params=params)

    # private endpoints

    def get_accounts(self):
        return self._call('get_accounts', 'GET', '/api/v3/accounts', auth=True)

    def send_order(self, order_type, symbol, side, size, limit_price=None, stop_price=None, client_order_id=None):
        data = {
            'orderType': order_type,
            'symbol': symbol,
            'side': side,
            'size': size,
        }
        # mkt orders carry no limit price
        if limit_price is not None:
            data['limitPrice'] = limit_price
        if stop_price:
            data['stopPrice'] = stop_price
        if client_order_id:
            data['cliOrdId'] = client_order_id
        return self._call('send_order', 'POST', '/api/v3/sendorder', data=data, auth=True)

    def edit_order(self, edit):
        return self._call('edit_order', 'POST', '/api/v3/editorder', data=dict(edit), auth=True)

    def cancel_order(self, order_id=None, cli_ord_id=None):
        if order_id:
            data = {'order_id': order_id}
        elif cli_ord_id:
            data = {'cliOrdId': cli_ord_id}
        else:
            raise ValueError("Either order_id or cli_ord_id must be given.")
        return self._call('cancel_order', 'POST', '/api/v3/cancelorder', data=data, auth=True)

    def cancel_all_orders(self, symbol=None):
        data = {'symbol': symbol} if symbol else {}
        return self._call('cancel_all_orders', 'POST', '/api/v3/cancelallorders', data=data, auth=True)

    def withdraw(self, target_address, currency, amount):
        data = {'targetAddress': target_address, 'currency': currency, 'amount': amount}
        return self._call('withdraw', 'POST', '/api/v3/withdrawal', data=data, auth=True)

    def cancel_all_orders_after(self, timeout=None):
        """Dead man's switch; ``timeout`` is in seconds, 0 disarms it."""
        data = {'timeout': timeout} if timeout is not None else {}
        return self._call('cancel_all_orders_after', 'POST', '/api/v3/cancelallordersafter', data=data, auth=True)

    def batch_order(self, element_json):
        # sent as raw JSON after "json=", not form-escaped
        data = 'json=' + json.dumps(element_json, separators=(',', ':'))
        return self._call('batch_order', 'POST', '/api/v3/batchorder', data=data, auth=True)

    def get_open_orders(self):
        return self._call('get_open_orders', 'GET', '/api/v3/openorders', auth=True)

    def get_open_positions(self):
        return self._call('get_open_positions', 'GET', '/api/v3/openpositions', auth=True)

    def get_recent_orders(self, symbol=None):
        params = {'symbol': symbol} if symbol else None
        return self._call('get_recent_orders', 'GET', '/api/v3/recentorders', params=params, auth=True)

    def get_fills(self, last_fill_time=None):
        params = {'lastFillTime': last_fill_time} if last_fill_time else None
        return self._call('get_fills', 'GET', '/api/v3/fills', params=params, auth=True)

    def get_transfers(self, last_transfer_time=None):
        params = {'lastTransferTime': last_transfer_time} if last_transfer_time else None
        return self._call('get_transfers', 'GET', '/api/v3/transfers', params=params, auth=True)

    def get_notifications(self):
        return self._call('get_notifications', 'GET', '/api/v3/notifications', auth=True)
