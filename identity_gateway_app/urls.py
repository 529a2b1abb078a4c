from django.urls import path

from .views import AccessTokenView, ApplicantView, IndexView, RefreshTokenView

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("api/access-token", AccessTokenView.as_view(), name="access-token"),
    path("api/refresh-token", RefreshTokenView.as_view(), name="refresh-token"),
    path("api/applicant/<str:applicant_id>", ApplicantView.as_view(), name="applicant"),
]
