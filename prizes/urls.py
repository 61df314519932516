from django.urls import path
from . import views

app_name = "prizes"

urlpatterns = [
    path("", views.prize_list, name="list"),
    path("add/", views.prize_add, name="add"),
    path("update/<int:pk>/", views.prize_update, name="update"),
    path("delete/<int:pk>/", views.prize_delete, name="delete"),
]
