import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken
from user.serializers import (
    AuthTokenSerializer,
    UserLoginSerializer,
    UserSignupSerializer,
)

logger = logging.getLogger(__name__)


def issue_tokens(user) -> dict:
    """simplejwt 로 access/refresh 토큰을 발급합니다."""
    refresh = RefreshToken.for_user(user)
    return {
        "email": user.email,
        "token": str(refresh.access_token),
        "refresh": str(refresh),
    }


class UserSignupView(APIView):
    permission_classes = []  # No permission required for signup
    authentication_classes = []

    @extend_schema(
        request=UserSignupSerializer,
        responses={201: AuthTokenSerializer},
        summary="User Signup",
        description="Register with email and password and receive JWT tokens.",
    )
    def post(self, request):
        serializer = UserSignupSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        logger.info(f"Registered user {user.pk}")
        return Response(issue_tokens(user), status=status.HTTP_201_CREATED)


class UserLoginView(APIView):
    permission_classes = []  # No permission required for login
    authentication_classes = []

    @extend_schema(
        request=UserLoginSerializer,
        responses={200: AuthTokenSerializer},
        summary="User Login",
        description="Login with email and password to get JWT tokens.",
    )
    def post(self, request):
        serializer = UserLoginSerializer(
            data=request.data, context={"request": request}
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        return Response(issue_tokens(user), status=status.HTTP_200_OK)
