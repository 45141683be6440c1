"""
Login user use case.
"""
from dataclasses import dataclass

from django.contrib.auth.hashers import check_password
from rest_framework_simplejwt.tokens import RefreshToken

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.user_repository import UserRepository
from ...domain.exceptions import InvalidCredentialsError, UserInactiveError
from ..dtos.auth_dto import LoginDTO, TokenDTO


@dataclass
class LoginUserUseCase(UseCase[LoginDTO, TokenDTO]):
    """Use case for user login."""

    user_repository: UserRepository

    def execute(self, input_dto: LoginDTO) -> UseCaseResult[TokenDTO]:
        user = self.user_repository.find_by_email(input_dto.email)

        if user is None or not check_password(input_dto.password, user.hashed_password):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise UserInactiveError(str(user.id))

        user.record_login()
        self.user_repository.save(user)

        # simplejwt builds tokens from the ORM user
        from apps.users.infrastructure.models.user_model import UserModel
        django_user = UserModel.objects.get(id=user.id)
        refresh = RefreshToken.for_user(django_user)

        return UseCaseResult.ok(
            TokenDTO(
                access_token=str(refresh.access_token),
                refresh_token=str(refresh),
            )
        )
