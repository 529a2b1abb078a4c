from django.urls import include, path

urlpatterns = [
    path("", include("identity_gateway_app.urls")),
]
