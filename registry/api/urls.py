from django.urls import path
from registry.api.views import (
    CitizenListCreateView,
    CitizenFindOneView,
    CitizenDetailView,
    CitizenByIdView,
)

urlpatterns = [
    path("citizens/", CitizenListCreateView.as_view(), name="citizen-list"),
    path("citizens/findOne/", CitizenFindOneView.as_view(), name="citizen-find-one"),
    # Storage-id addressing (read and delete only)
    path("citizens/id/<str:record_id>/", CitizenByIdView.as_view(), name="citizen-by-id"),
    path("citizens/<str:national_id>/", CitizenDetailView.as_view(), name="citizen-detail"),
]
