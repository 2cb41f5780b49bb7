import base64
import hashlib
import hmac
import threading
import time


class NonceGenerator:
    """Millisecond timestamp followed by a 5-digit rolling counter.

    The counter wraps from 9999 back to 0, so two calls landing in the same
    millisecond across a wrap produce the same nonce. Kept as is.
    """

    def __init__(self, clock=None, start=0):
        self._clock = clock or (lambda: int(time.time() * 1000))
        self._counter = start
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            counter = self._counter
            self._counter = 0 if counter >= 9999 else counter + 1
            return f"{self._clock()}{counter:05d}"


_default_nonce = NonceGenerator()


def create_nonce():
    """Process-wide nonce shared by every client."""
    return _default_nonce()


def sign_request(api_secret, endpoint, nonce, post_data=''):
    """Return the Authent header value for an authenticated call.

    HMAC-SHA512 keyed with the base64-decoded secret, taken over the raw
    SHA256 digest of post_data + nonce + endpoint, then base64 encoded.
    """
    message = post_data + nonce + endpoint
    sha256_hash = hashlib.sha256(message.encode('utf-8')).digest()
    secret_decoded = base64.b64decode(api_secret)
    signature = hmac.new(secret_decoded, sha256_hash, digestmod='sha512').digest()
    return base64.b64encode(signature).decode('utf-8')
