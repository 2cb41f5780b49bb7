import logging
import os
from urllib.parse import urlencode

from requests import Session

from kraken_auth import create_nonce, sign_request

logger = logging.getLogger(__name__)


class HTTP(Session):
    def __init__(self, endpoint, api_key=None, api_secret=None, timeout=None, nonce=None):
        super().__init__()
        self.endpoint = endpoint.rstrip('/')
        self.api_key = api_key or os.getenv('API_KEY')
        self.api_secret = api_secret or os.getenv('API_SECRET')
        self.timeout = timeout
        self.nonce = nonce or create_nonce

    def request(self, method, path, params=None, data=None, auth=False, **kwargs):
        """Fire one request against ``endpoint + path``.

        ``params`` go to the query string, ``data`` is form-encoded into the
        body. With ``auth`` the call is signed over the body, or over the
        query string when there is no body.
        """
        query = urlencode(params) if params else ''
        body = urlencode(data) if isinstance(data, dict) else data
        url = self.endpoint + path + ('?' + query if query else '')

        headers = {'Accept': 'application/json'}
        headers.update(kwargs.pop('headers', None) or {})
        payload = None
        if body is not None:
            payload = body.encode('utf-8')
            headers['Content-Type'] = 'application/x-www-form-urlencoded'
            headers['Content-Length'] = str(len(payload))

        # Sign the request if needed
        if auth:
            if not self.api_key or not self.api_secret:
                raise ValueError("API key and secret are required for authenticated endpoints.")
            nonce = self.nonce()
            headers.update({
                'APIKey': self.api_key,
                'Nonce': nonce,
                'Authent': sign_request(self.api_secret, path, nonce, body if body is not None else query),
            })

        logger.debug("%s %s (signed=%s)", method, path, auth)
        kwargs.setdefault('timeout', self.timeout)
        return super().request(method, url, data=payload, headers=headers, **kwargs)
