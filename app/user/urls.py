from django.urls import re_path
from rest_framework_simplejwt.views import TokenRefreshView
from user.views import UserLoginView, UserSignupView

urlpatterns = [
    re_path(r"^signup/?$", UserSignupView.as_view(), name="signup"),
    re_path(r"^login/?$", UserLoginView.as_view(), name="login"),
    re_path(r"^token/refresh/?$", TokenRefreshView.as_view(), name="token_refresh"),
]
