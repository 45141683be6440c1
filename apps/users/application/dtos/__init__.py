# DTOs
from .user_dto import UserDTO, UserCreateDTO
from .auth_dto import LoginDTO, TokenDTO

__all__ = ['UserDTO', 'UserCreateDTO', 'LoginDTO', 'TokenDTO']
