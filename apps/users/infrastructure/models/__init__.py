from .user_model import UserModel, UserEventModel, UserManager

__all__ = ['UserModel', 'UserEventModel', 'UserManager']
