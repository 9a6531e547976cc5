from django.urls import path

from . import views

urlpatterns = [
    path("reserve/<int:hostel_id>/", views.reserve_view, name="reserve"),
    path("confirmation/<int:reservation_id>/", views.confirmation_view, name="confirmation"),
]
