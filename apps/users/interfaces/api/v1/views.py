"""
Users API v1 views.
"""
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ....application.use_cases import SignUpUserUseCase, LoginUserUseCase
from ....application.dtos.user_dto import UserCreateDTO, UserDTO
from ....application.dtos.auth_dto import LoginDTO
from ....domain.exceptions import UserNotFoundError
from ....infrastructure.repositories import DjangoUserRepository, DjangoUserHistoryRepository
from ...serializers.user_serializer import (
    UserSerializer,
    UserCreateSerializer,
    RegisteredEventsSerializer,
)
from ...serializers.auth_serializer import (
    LoginSerializer,
    TokenSerializer,
)


@extend_schema(tags=['Auth'])
class SignupView(APIView):
    """Account sign up endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=UserCreateSerializer,
        responses={201: UserSerializer},
        summary="Create a new account",
    )
    def post(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = SignUpUserUseCase(user_repository=DjangoUserRepository())
        result = use_case.execute(UserCreateDTO(**serializer.validated_data))

        output_serializer = UserSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_201_CREATED)


@extend_schema(tags=['Auth'])
class LoginView(APIView):
    """User login endpoint."""
    permission_classes = [AllowAny]

    @extend_schema(
        request=LoginSerializer,
        responses={200: TokenSerializer},
        summary="Login and get tokens",
    )
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        use_case = LoginUserUseCase(user_repository=DjangoUserRepository())
        result = use_case.execute(LoginDTO(**serializer.validated_data))

        output_serializer = TokenSerializer(result.data)
        return Response(output_serializer.data, status=status.HTTP_200_OK)


@extend_schema(tags=['Users'])
class UserMeView(APIView):
    """Current user endpoint."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: UserSerializer},
        summary="Get current user profile",
    )
    def get(self, request):
        user = DjangoUserRepository().find_by_id(request.user.id)
        if user is None:
            raise UserNotFoundError(str(request.user.id))
        serializer = UserSerializer(UserDTO.from_entity(user))
        return Response(serializer.data)


@extend_schema(tags=['Users'])
class UserRegisteredEventsView(APIView):
    """Events the current user registered for."""
    permission_classes = [IsAuthenticated]

    @extend_schema(
        responses={200: RegisteredEventsSerializer},
        summary="List the current user's registered events",
    )
    def get(self, request):
        event_ids = DjangoUserHistoryRepository().find_events(request.user.id)
        serializer = RegisteredEventsSerializer({'events_registered': sorted(event_ids)})
        return Response(serializer.data)
