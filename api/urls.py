from django.urls import path
from . import views

app_name = "api"

urlpatterns = [
    path("winners/", views.winner_list, name="winners"),
    path("winners/public/", views.public_winners, name="public_winners"),
    path("winners/upload/", views.upload, name="upload"),
    path("winners/<int:pk>/", views.winner_detail, name="winner_detail"),
    path("stats/", views.stats, name="stats"),
]
