from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import ImproperlyConfigured


DEFAULT_API_URL = "https://api.sumsub.com"
DEFAULT_LEVEL_NAME = "basic-kyc-level"
TOKEN_TTL_SECS = 1200  # 20 minutes


@dataclass(frozen=True)
class GatewayConfig:
    app_token: str
    secret_key: str
    level_name: str = DEFAULT_LEVEL_NAME
    base_url: str = DEFAULT_API_URL
    environment: str = "sandbox"
    port: int = 3000
    request_timeout: Optional[float] = 10
    token_ttl: int = TOKEN_TTL_SECS

    @classmethod
    def from_settings(cls, settings) -> "GatewayConfig":
        """
        Build the gateway configuration from Django settings.

        Raises ImproperlyConfigured when the provider credentials are missing,
        so a misconfigured deployment fails at startup instead of per request.
        """
        app_token = getattr(settings, "SUMSUB_APP_TOKEN", None)
        secret_key = getattr(settings, "SUMSUB_SECRET_KEY", None)
        if not app_token:
            raise ImproperlyConfigured("SUMSUB_APP_TOKEN is not configured")
        if not secret_key:
            raise ImproperlyConfigured("SUMSUB_SECRET_KEY is not configured")

        return cls(
            app_token=app_token,
            secret_key=secret_key,
            level_name=getattr(settings, "SUMSUB_LEVEL_NAME", None) or DEFAULT_LEVEL_NAME,
            base_url=(getattr(settings, "SUMSUB_API_URL", None) or DEFAULT_API_URL).rstrip("/"),
            environment=getattr(settings, "SUMSUB_ENVIRONMENT", None) or "sandbox",
            port=int(getattr(settings, "PORT", 3000)),
            request_timeout=getattr(settings, "SUMSUB_REQUEST_TIMEOUT", 10),
        )
