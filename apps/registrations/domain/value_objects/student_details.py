"""
Student details value object.
"""
from dataclasses import dataclass

from shared.domain import ValueObject
from ..exceptions import InvalidRegistrationInputError

# Column widths of the registration record
FIELD_MAX_LENGTHS = {
    'name': 255,
    'usn': 64,
    'email': 254,
    'semester': 64,
}

REQUIRED_FIELDS = tuple(FIELD_MAX_LENGTHS)


@dataclass(frozen=True)
class StudentDetails(ValueObject):
    """Fields a student submits on the registration form."""
    name: str
    usn: str
    email: str
    semester: str

    def __post_init__(self):
        for field_name in REQUIRED_FIELDS:
            value = getattr(self, field_name)
            if value is None:
                value = ''
            if not isinstance(value, str):
                raise InvalidRegistrationInputError(
                    field_name, f"Registration field '{field_name}' must be text"
                )
            value = value.strip()
            if not value:
                raise InvalidRegistrationInputError(field_name)
            max_length = FIELD_MAX_LENGTHS[field_name]
            if len(value) > max_length:
                raise InvalidRegistrationInputError(
                    field_name,
                    f"Registration field '{field_name}' must be at most {max_length} characters",
                )
            object.__setattr__(self, field_name, value)
