"""
Email value object.
"""
import re
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')


@dataclass(frozen=True)
class Email(ValueObject):
    """Account email; the domain part is stored lower-cased."""
    value: str

    def __post_init__(self):
        if not EMAIL_PATTERN.match(self.value or ''):
            raise InvalidEmailError(self.value)
        local_part, _, domain = self.value.rpartition('@')
        object.__setattr__(self, 'value', f"{local_part}@{domain.lower()}")

    def __str__(self) -> str:
        return self.value
