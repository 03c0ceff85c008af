# =======================================================================================
# checkin/utils/__init__.py - Utils Package
# =======================================================================================
from .exceptions import *

__all__ = [
    "CheckinError", "DuplicateIdError", "RegistrationNotFoundError", "TagAlreadyBoundError",
    "UnknownTagError", "InvalidLocationError", "InvalidImportError",
]
