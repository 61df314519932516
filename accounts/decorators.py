from functools import wraps
from django.shortcuts import redirect


def require_panel_admin(view_func):
    """
    Guard for admin panel pages.
    Anonymous or non-staff users are sent to the panel login page.
    """
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        user = getattr(request, "user", None)
        if not user or not user.is_authenticated or not getattr(user, "is_panel_admin", False):
            return redirect("accounts:login")
        return view_func(request, *args, **kwargs)
    return _wrapped


def redirect_if_authenticated(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        user = getattr(request, "user", None)
        if user and user.is_authenticated and getattr(user, "is_panel_admin", False):
            return redirect("winners:dashboard")
        return view_func(request, *args, **kwargs)
    return _wrapped
