from django.urls import path

from . import views

urlpatterns = [
    path("payment-info/", views.payment_info_view, name="payment_info"),
    path("about/", views.about_view, name="about"),
    path("contact/", views.contact_view, name="contact"),
]
