import logging

from django.contrib import messages
from django.contrib.auth import authenticate, get_user_model, login, logout
from django.contrib.auth.decorators import login_required
from django.db import DatabaseError
from django.shortcuts import redirect, render

from bookings.services import reservations_for_account

from .forms import LoginForm, SignupForm
from .models import Profile, get_profile

logger = logging.getLogger(__name__)


def get_login_redirect(user, profile):
    if user.is_staff or user.is_superuser or (profile and profile.is_admin):
        return "panel_dashboard"
    return "home"


def login_view(request):
    if request.user.is_authenticated:
        return redirect(get_login_redirect(request.user, get_profile(request.user)))

    form = LoginForm(request.POST or None)
    if request.method == "POST" and form.is_valid():
        email = form.cleaned_data["email"]
        password = form.cleaned_data["password"]
        user_model = get_user_model()
        matched_user = user_model.objects.filter(email__iexact=email).first()
        user = None
        if matched_user:
            user = authenticate(request, username=matched_user.username, password=password)

        if user is None:
            messages.error(request, "Invalid email or password")
            return redirect("login")

        profile = get_profile(user)
        login(request, user)
        messages.success(request, f"Welcome back, {profile.full_name}!")
        return redirect(get_login_redirect(user, profile))

    return render(request, "accounts/login.html", {"form": form, "title": "Login"})


def register_view(request):
    if request.user.is_authenticated:
        return redirect("home")

    form = SignupForm(request.POST or None)
    if request.method == "POST":
        if not form.is_valid():
            for errors in form.errors.values():
                for error in errors:
                    messages.error(request, error)
            return render(request, "accounts/register.html", {"form": form, "title": "Register"})

        try:
            Profile.create_user_with_profile(
                email=form.cleaned_data["email"],
                password=form.cleaned_data["password"],
                full_name=form.cleaned_data["name"],
                phone=form.cleaned_data["phone"],
            )
        except DatabaseError:
            logger.exception("Registration failed for %s", form.cleaned_data["email"])
            messages.error(request, "Registration failed. Please try again.")
            return redirect("register")

        messages.success(request, "Registration successful! Please login.")
        return redirect("login")

    return render(request, "accounts/register.html", {"form": form, "title": "Register"})


def logout_view(request):
    logout(request)
    request.session.flush()
    return redirect("home")


@login_required
def profile_view(request):
    profile = get_profile(request.user)
    return render(
        request,
        "accounts/profile.html",
        {
            "title": "My Profile",
            "profile": profile,
            "reservations": reservations_for_account(profile),
        },
    )
