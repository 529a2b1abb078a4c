import hashlib
import hmac
import time
from typing import Dict, Optional

from django.core.exceptions import ImproperlyConfigured


class RequestSigner:
    """
    Signs outbound requests to the verification provider.

    The signature is HMAC-SHA256 over ``timestamp + METHOD + path + body`` keyed
    with the shared secret, rendered as lowercase hex. ``path`` includes the
    query string and ``body`` must be the exact string sent on the wire.
    """

    def __init__(self, secret_key: str):
        if not secret_key:
            raise ImproperlyConfigured("SUMSUB_SECRET_KEY is not configured")
        self._secret = secret_key.encode("utf-8")

    def sign(self, timestamp, method: str, path: str, body: str = "") -> str:
        message = f"{timestamp}{method.upper()}{path}{body or ''}"
        return hmac.new(self._secret, message.encode("utf-8"), hashlib.sha256).hexdigest()

    def headers(
        self,
        app_token: str,
        method: str,
        path: str,
        body: str = "",
        timestamp: Optional[int] = None,
    ) -> Dict[str, str]:
        ts = str(int(time.time()) if timestamp is None else timestamp)
        return {
            "X-App-Token": app_token,
            "X-App-Access-Ts": ts,
            "X-App-Access-Sig": self.sign(ts, method, path, body),
        }
