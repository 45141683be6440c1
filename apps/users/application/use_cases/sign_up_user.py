"""
Sign up user use case.
"""
import logging
from dataclasses import dataclass

from django.contrib.auth.hashers import make_password

from shared.application import UseCase, UseCaseResult
from ...domain.entities.user import User
from ...domain.repositories.user_repository import UserRepository
from ...domain.exceptions import UserAlreadyExistsError
from ...domain.value_objects.role import UserRole
from ..dtos.user_dto import UserCreateDTO, UserDTO

logger = logging.getLogger(__name__)


@dataclass
class SignUpUserUseCase(UseCase[UserCreateDTO, UserDTO]):
    """Use case for creating a new account."""

    user_repository: UserRepository

    def execute(self, input_dto: UserCreateDTO) -> UseCaseResult[UserDTO]:
        if self.user_repository.exists_by_email(input_dto.email):
            raise UserAlreadyExistsError(field="email", value=input_dto.email)

        if self.user_repository.exists_by_username(input_dto.username):
            raise UserAlreadyExistsError(field="username", value=input_dto.username)

        user = User.create(
            email=input_dto.email,
            username=input_dto.username,
            hashed_password=make_password(input_dto.password),
            role=input_dto.role or UserRole.STUDENT.value,
        )

        saved_user = self.user_repository.save(user)
        for event in user.clear_domain_events():
            logger.info(f"{event.event_type}: {event.payload()}")

        return UseCaseResult.ok(UserDTO.from_entity(saved_user))
