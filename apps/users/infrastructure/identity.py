"""
Identity provider adapter over Django authentication.
"""
from typing import Optional

from ..domain.value_objects.identity import Identity


def identity_from_user(user) -> Optional[Identity]:
    """Build the verified identity for a request user, None when anonymous."""
    if user is None or not getattr(user, 'is_authenticated', False):
        return None
    if not user.is_active:
        return None
    return Identity(uid=user.id, email=user.email, role=user.role)
