# Value objects
from .registration_id import RegistrationId
from .student_details import StudentDetails
from .policies import DuplicatePolicy, RegistrationStep

__all__ = ['RegistrationId', 'StudentDetails', 'DuplicatePolicy', 'RegistrationStep']
