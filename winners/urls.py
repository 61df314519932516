from django.urls import path
from . import views

app_name = "winners"

urlpatterns = [
    path("", views.panel_index, name="index"),
    path("dashboard/", views.dashboard, name="dashboard"),
    path("winners/", views.winner_list, name="list"),
    path("winners/<int:pk>/delete/", views.winner_delete, name="delete"),
    path("upload/", views.upload, name="upload"),
    path("download-template/", views.download_template, name="download_template"),
    path("update-prize/", views.update_prize, name="update_prize"),
]
