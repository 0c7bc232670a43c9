"""URL configuration for the API application."""

from django.urls import URLPattern, path

from apps.api import views

app_name = "api"

urlpatterns: list[URLPattern] = [
    path("users/", views.UserListView.as_view(), name="user-list"),
    path("users/<uuid:user_id>/cart/", views.CartView.as_view(), name="cart"),
    path(
        "users/<uuid:user_id>/cart/<str:product_id>/",
        views.CartItemView.as_view(),
        name="cart-item",
    ),
    path("users/<uuid:user_id>/reminder/", views.ReminderView.as_view(), name="reminder"),
    path("users/<str:username>/", views.UserDetailView.as_view(), name="user-detail"),
    path("users/<str:username>/password/", views.PasswordView.as_view(), name="user-password"),
    path("products/", views.ProductListView.as_view(), name="product-list"),
    path("products/<uuid:product_id>/", views.ProductDetailView.as_view(), name="product-detail"),
]
