import os

from identity_gateway.settings import PORT

bind = f"0.0.0.0:{PORT}"
wsgi_app = "identity_gateway.wsgi:application"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))
accesslog = "-"
