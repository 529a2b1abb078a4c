import logging

from django.apps import AppConfig
from django.conf import settings

from .client import SumsubClient
from .config import GatewayConfig


logger = logging.getLogger("IdentityGateway")


class IdentityGatewayAppConfig(AppConfig):
    name = "identity_gateway_app"
    gateway_config = None
    client = None

    def get_client(self) -> SumsubClient:
        return self.client

    def ready(self):
        # Missing credentials raise ImproperlyConfigured here, before any request is served.
        self.gateway_config = GatewayConfig.from_settings(settings)
        self.client = SumsubClient(self.gateway_config)
        logger.info(f"Sumsub Level: {self.gateway_config.level_name}")
        logger.info(f"Environment: {self.gateway_config.environment}")
        logger.info(f"Port: {self.gateway_config.port}")
