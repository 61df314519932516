from rest_framework.authentication import SessionAuthentication


class PanelSessionAuthentication(SessionAuthentication):
    """Admin panel session, answering unauthenticated API calls with 401 instead of 403."""

    def authenticate_header(self, request):
        return "Session"
