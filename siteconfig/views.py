from django.shortcuts import render

from .models import PaymentInfo


def payment_info_view(request):
    return render(
        request,
        "siteconfig/payment_info.html",
        {"title": "Payment Information", "payment_info": PaymentInfo.active()},
    )


def about_view(request):
    return render(request, "siteconfig/about.html", {"title": "About Us"})


def contact_view(request):
    return render(request, "siteconfig/contact.html", {"title": "Contact Us"})
