"""Auth API views.

Implements token-based registration and login. Registration also creates the
Profile carrying the user's marketplace role.
"""

from django.db import transaction
from rest_framework import status
from rest_framework.authtoken.models import Token
from rest_framework.response import Response
from rest_framework.views import APIView

from profiles.models import Profile
from .permissions import AllowAnyRegistration, AllowedAnyLogin
from .serializers import LoginSerializer, RegistrationSerializer


def _token_payload(user, profile_type: str) -> dict:
    token, _ = Token.objects.get_or_create(user=user)
    return {
        "token": token.key,
        "username": user.username,
        "email": user.email,
        "user_id": user.id,
        "type": profile_type,
    }


class RegistrationView(APIView):
    """POST /api/registration/ -> create user and profile, return auth token."""

    permission_classes = [AllowAnyRegistration]

    def post(self, request, *args, **kwargs):
        serializer = RegistrationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        data = serializer.validated_data
        with transaction.atomic():
            user = serializer.save()
            profile, _ = Profile.objects.get_or_create(
                user=user,
                defaults={
                    "type": data["type"],
                    "craft_type": data.get("craft_type", ""),
                    "location": data.get("location", ""),
                },
            )
        return Response(_token_payload(user, profile.type), status=status.HTTP_201_CREATED)


class LoginView(APIView):
    """POST /api/login/ -> validate credentials and return auth token."""

    permission_classes = [AllowedAnyLogin]

    def post(self, request, *args, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = serializer.validated_data["user"]
        profile = getattr(user, "profile", None)
        return Response(_token_payload(user, profile.type if profile else ""), status=status.HTTP_200_OK)
