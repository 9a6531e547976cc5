from django.urls import path

from . import admin_panel_views as views

urlpatterns = [
    path("", views.panel_dashboard_view, name="panel_dashboard"),
    path("hostels/", views.panel_hostels_view, name="panel_hostels"),
    path("hostels/new/", views.panel_hostel_create_view, name="panel_hostel_create"),
    path("hostels/<int:hostel_id>/edit/", views.panel_hostel_edit_view, name="panel_hostel_edit"),
    path("hostels/<int:hostel_id>/delete/", views.panel_hostel_delete_view, name="panel_hostel_delete"),
    path(
        "hostels/<int:hostel_id>/toggle-status/",
        views.panel_hostel_toggle_status_view,
        name="panel_hostel_toggle_status",
    ),
    path("reservations/", views.panel_reservations_view, name="panel_reservations"),
    path(
        "reservations/<int:reservation_id>/status/",
        views.panel_reservation_status_view,
        name="panel_reservation_status",
    ),
    path(
        "reservations/<int:reservation_id>/delete/",
        views.panel_reservation_delete_view,
        name="panel_reservation_delete",
    ),
    path("users/", views.panel_users_view, name="panel_users"),
    path("users/<int:user_id>/delete/", views.panel_user_delete_view, name="panel_user_delete"),
    path("settings/", views.panel_settings_view, name="panel_settings"),
]
