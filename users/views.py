"""
Authentication Views.
"""

from rest_framework import generics
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from users.serializers import UserDetailSerializer, UserRegistrationSerializer


class RegisterUserView(generics.CreateAPIView):
    """
    POST /api/auth/register/
    Public endpoint to register a new user.
    """

    permission_classes = [AllowAny]
    authentication_classes = []
    serializer_class = UserRegistrationSerializer


class UserProfileView(APIView):
    """
    GET /api/auth/me/
    Returns details about the currently logged-in user and their current organization.
    """

    permission_classes = [IsAuthenticated]

    def get(self, request):
        serializer = UserDetailSerializer(request.user)
        return Response(serializer.data)
