from rest_framework.permissions import BasePermission


class IsPanelAdmin(BasePermission):
    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, "is_panel_admin", False))
