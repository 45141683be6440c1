"""
Registration write policies.
"""
from enum import Enum


class DuplicatePolicy(str, Enum):
    """What a resubmission for an existing (event, usn) pair does."""
    OVERWRITE = 'overwrite'
    REJECT = 'reject'


class RegistrationStep(str, Enum):
    """Write steps in execution order."""
    RECORD = 'record'
    COUNTER = 'counter'
    HISTORY = 'history'
