import logging
from django.contrib import messages
from django.contrib.auth import authenticate, login, logout, update_session_auth_hash
from django.shortcuts import redirect, render
from .decorators import redirect_if_authenticated, require_panel_admin
from .forms import LoginForm, SettingsForm

logger = logging.getLogger(__name__)


@redirect_if_authenticated
def login_view(request):
    if request.method == "POST":
        form = LoginForm(request.POST)
        if not form.is_valid():
            messages.error(request, "Username and password are required")
            return redirect("accounts:login")
        user = authenticate(
            request,
            username=form.cleaned_data["username"],
            password=form.cleaned_data["password"],
        )
        if user is None or not user.is_panel_admin:
            logger.warning("Panel login failed for %s", form.cleaned_data["username"])
            messages.error(request, "Invalid username or password")
            return redirect("accounts:login")
        login(request, user)
        messages.success(request, "Login successful")
        return redirect("winners:dashboard")
    return render(request, "accounts/login.html", {"form": LoginForm(), "title": "Admin Login"})


def logout_view(request):
    logout(request)
    return redirect("accounts:login")


@require_panel_admin
def settings_view(request):
    if request.method == "POST":
        form = SettingsForm(request.POST, user=request.user)
        if not form.is_valid():
            for err in form.non_field_errors():
                messages.error(request, err)
            for field, errs in form.errors.items():
                if field != "__all__":
                    messages.error(request, f"{field}: {' '.join(errs)}")
            return redirect("accounts:settings")
        user = form.save()
        if form.cleaned_data.get("new_password"):
            # keep the current session valid after the hash changes
            update_session_auth_hash(request, user)
        messages.success(request, "Settings updated successfully")
        return redirect("accounts:settings")
    return render(
        request,
        "accounts/settings.html",
        {
            "title": "Settings",
            "admin_user": request.user,
            "active_nav": "settings",
        },
    )
