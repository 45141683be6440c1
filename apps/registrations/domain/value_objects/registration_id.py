"""
Registration id value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject

SEPARATOR = '_'


@dataclass(frozen=True)
class RegistrationId(ValueObject):
    """Derived key of a registration: ``<event_id>_<usn>``."""
    value: str

    @classmethod
    def derive(cls, event_id: str, usn: str) -> 'RegistrationId':
        return cls(value=f"{event_id}{SEPARATOR}{usn}")

    def __str__(self) -> str:
        return self.value
