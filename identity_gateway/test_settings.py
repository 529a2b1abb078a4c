from .settings import *  # noqa: F401,F403

SECRET_KEY = "test-secret-key"

SUMSUB_APP_TOKEN = "test-app-token"
SUMSUB_SECRET_KEY = "test-secret"
SUMSUB_LEVEL_NAME = "basic-kyc-level"
SUMSUB_API_URL = "https://api.sumsub.test"
SUMSUB_ENVIRONMENT = "sandbox"

PORT = 3000

ALLOWED_HOSTS = ["testserver", "localhost"]

LOGGING["loggers"]["IdentityGateway"]["level"] = "DEBUG"  # noqa: F405
