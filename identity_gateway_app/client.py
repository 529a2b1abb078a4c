import http.cookiejar
import json
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote, urlencode

import requests

from .config import GatewayConfig
from .signer import RequestSigner


logger = logging.getLogger("IdentityGateway")


class SumsubError(Exception):
    pass


class SumsubAPIError(SumsubError):
    def __init__(self, status_code: int, text: str):
        self.status_code = status_code
        self.text = text
        super().__init__(f"Sumsub API error: {status_code} {text}")


class SumsubRequestError(SumsubError):
    pass


def stateless_session() -> requests.Session:
    """A session whose cookie jar refuses every cookie."""
    session = requests.Session()
    session.cookies.set_policy(http.cookiejar.DefaultCookiePolicy(allowed_domains=[]))
    return session


class SumsubClient:
    """
    Thin signed client for the provider's REST API.

    Every call is signed with a fresh timestamp. Nothing is retried: any
    non-success status or transport failure is raised as a SumsubError.
    """

    def __init__(self, config: GatewayConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.signer = RequestSigner(config.secret_key)
        self.session = session or stateless_session()

    def request(self, method: str, path: str, body: Optional[Dict[str, Any]] = None) -> Any:
        method = method.upper()
        body_str = json.dumps(body) if body is not None else ""
        headers = self.signer.headers(self.config.app_token, method, path, body_str)
        headers["Content-Type"] = "application/json"

        try:
            response = self.session.request(
                method,
                f"{self.config.base_url}{path}",
                headers=headers,
                data=body_str.encode("utf-8") if body is not None else None,
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request failed: {method} {path}: {e}")
            raise SumsubRequestError(f"Request to Sumsub failed: {e}") from e

        if not response.ok:
            logger.error(f"Sumsub API Error: {response.status_code} {response.text}")
            raise SumsubAPIError(response.status_code, response.text)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Sumsub returned a non-JSON body for {method} {path}")
            raise SumsubRequestError(f"Invalid JSON in Sumsub response: {e}") from e

    def create_applicant(self, external_user_id: str, level_name: str) -> Dict[str, Any]:
        path = "/resources/applicants?" + urlencode({"levelName": level_name})
        return self.request("POST", path, {"externalUserId": external_user_id})

    def create_sdk_access_token(
        self,
        user_id: str,
        level_name: str,
        ttl: Optional[int] = None,
        applicant_identifiers: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body = {
            "userId": user_id,
            "levelName": level_name,
            "ttlInSecs": self.config.token_ttl if ttl is None else ttl,
        }
        if applicant_identifiers is not None:
            body["applicantIdentifiers"] = applicant_identifiers
        return self.request("POST", "/resources/accessTokens/sdk", body)

    def get_applicant(self, applicant_id: str) -> Any:
        return self.request("GET", f"/resources/applicants/{quote(applicant_id, safe='')}/one")
