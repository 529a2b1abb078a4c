import logging
import secrets
import string
import time

from django.apps import apps
from django.views.generic import TemplateView
from rest_framework import status
from rest_framework.parsers import JSONParser
from rest_framework.response import Response
from rest_framework.views import APIView

from .client import SumsubError


logger = logging.getLogger("IdentityGateway")

SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 6


def get_client():
    return apps.get_app_config("identity_gateway_app").get_client()


def make_unique_user_id(user_id) -> str:
    """
    Derive a per-session identifier so the same caller id can be verified repeatedly.

    Format: ``{user_id}_{unix_millis}_{6 lowercase alphanumerics}``.
    """
    suffix = "".join(secrets.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return f"{user_id}_{int(time.time() * 1000)}_{suffix}"


def valid_user_id(user_id) -> bool:
    if user_id is None or isinstance(user_id, (dict, list, bool)):
        return False
    return str(user_id) != ""


def read_body(request) -> dict:
    return request.data if isinstance(request.data, dict) else {}


def build_missing_user_id_response() -> Response:
    return Response(
        {"error": "userId is required"},
        status=status.HTTP_400_BAD_REQUEST,
    )


def build_upstream_error_response(message, error: SumsubError) -> Response:
    return Response(
        {"error": message, "details": str(error)},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


class AccessTokenView(APIView):
    parser_classes = (JSONParser,)

    def post(self, request, *args, **kwargs):
        data = read_body(request)
        user_id = data.get("userId")
        if not valid_user_id(user_id):
            return build_missing_user_id_response()

        client = get_client()
        level_name = data.get("levelName") or client.config.level_name
        unique_user_id = make_unique_user_id(user_id)

        try:
            logger.info(f"Creating applicant for user: [{unique_user_id}] with level: [{level_name}]")
            applicant = client.create_applicant(unique_user_id, level_name)
            applicant_id = applicant.get("id") if isinstance(applicant, dict) else None
            logger.info(f"Created applicant with ID: [{applicant_id}]")

            # SDK tokens are issued for the external user id, not the applicant id
            logger.info("Generating SDK access token...")
            token = client.create_sdk_access_token(unique_user_id, level_name, client.config.token_ttl)
        except SumsubError as e:
            logger.error(f"Error generating access token: {e}")
            return build_upstream_error_response("Failed to generate access token", e)

        return Response(
            {
                "token": token.get("token") if isinstance(token, dict) else None,
                "applicantId": applicant_id,
                "userId": unique_user_id,
            },
            status=status.HTTP_200_OK,
        )


class RefreshTokenView(APIView):
    parser_classes = (JSONParser,)

    def post(self, request, *args, **kwargs):
        data = read_body(request)
        user_id = data.get("userId")
        if not valid_user_id(user_id):
            return build_missing_user_id_response()

        client = get_client()
        logger.info(f"Refreshing access token for user: [{user_id}]")
        try:
            # The API requires applicantIdentifiers on refresh even when empty
            token = client.create_sdk_access_token(
                user_id,
                client.config.level_name,
                client.config.token_ttl,
                applicant_identifiers={},
            )
        except SumsubError as e:
            logger.error(f"Error refreshing access token: {e}")
            return build_upstream_error_response("Failed to refresh access token", e)

        return Response(
            {
                "token": token.get("token") if isinstance(token, dict) else None,
                "userId": user_id,
            },
            status=status.HTTP_200_OK,
        )


class ApplicantView(APIView):
    def get(self, request, applicant_id, *args, **kwargs):
        try:
            applicant = get_client().get_applicant(applicant_id)
        except SumsubError as e:
            logger.error(f"Error fetching applicant [{applicant_id}]: {e}")
            return build_upstream_error_response("Failed to fetch applicant", e)
        return Response(applicant, status=status.HTTP_200_OK)


class IndexView(TemplateView):
    template_name = "identity_gateway_app/index.html"
