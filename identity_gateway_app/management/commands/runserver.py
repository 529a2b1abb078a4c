from django.apps import apps
from django.core.management.commands.runserver import Command as RunserverCommand


class Command(RunserverCommand):
    """runserver that listens on the configured PORT unless an address is given."""

    @property
    def default_port(self):
        return str(apps.get_app_config("identity_gateway_app").gateway_config.port)
