from django.urls import path
from . import views

app_name = "public"

urlpatterns = [
    path("", views.home, name="home"),
    path("Winner-List/", views.winner_list, name="winner_list"),
    path("Products/", views.products, name="products"),
    path("Prize/", views.prize, name="prize"),
    path("How-to-Win/", views.how_to_win, name="how_to_win"),
    path("Status/", views.status, name="status"),
    path("Terms/", views.terms, name="terms"),
    path("Contact/", views.contact, name="contact"),
    path("search-result/", views.search_result, name="search_result"),
    path("winner-cash/", views.winner_cash, name="winner_cash"),
    path("car-processing/", views.car_processing, name="car_processing"),
    path("check-status/", views.check_status, name="check_status"),
    path("winner-details/<str:wcode>/", views.winner_details, name="winner_details"),
    path("search-winners/", views.search_winners, name="search_winners"),
]
