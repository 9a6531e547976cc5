from django.urls import path

from . import views

urlpatterns = [
    path("", views.home_view, name="home"),
    path("hostels/", views.hostel_list_view, name="hostel_list"),
    path("hostel/<int:hostel_id>/", views.hostel_detail_view, name="hostel_detail"),
]
