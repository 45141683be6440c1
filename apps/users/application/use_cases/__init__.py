from .sign_up_user import SignUpUserUseCase
from .login_user import LoginUserUseCase

__all__ = ['SignUpUserUseCase', 'LoginUserUseCase']
