"""Helpers for stubbing the provider API in tests."""

import json
from unittest import mock

import requests

from identity_gateway_app.client import SumsubClient
from identity_gateway_app.config import GatewayConfig


def make_config(**overrides) -> GatewayConfig:
    values = {
        "app_token": "test-app-token",
        "secret_key": "test-secret",
        "level_name": "basic-kyc-level",
        "base_url": "https://api.sumsub.test",
    }
    values.update(overrides)
    return GatewayConfig(**values)


def make_response(payload=None, status_code=200, text=None):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text if text is not None else json.dumps(payload)
    response.json.return_value = payload
    return response


def make_client(*responses, **config_overrides) -> SumsubClient:
    """A client whose session replays ``responses`` in order."""
    session = mock.Mock(spec=requests.Session)
    session.request.side_effect = list(responses)
    return SumsubClient(make_config(**config_overrides), session=session)


def sent_body(call) -> dict:
    data = call.kwargs["data"]
    return json.loads(data.decode("utf-8")) if data is not None else None
