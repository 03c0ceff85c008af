# =======================================================================================
# checkin/utils/exceptions.py - Custom Exceptions
# =======================================================================================
class CheckinError(Exception):
    """Base exception for the check-in service."""
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

class DuplicateIdError(CheckinError):
    """Raised when a registration id is already registered."""
    status_code = 400

class RegistrationNotFoundError(CheckinError):
    """Raised when no attendee holds the registration id."""
    status_code = 404

class TagAlreadyBoundError(CheckinError):
    """Raised when a tag (or the registration) is already bound."""
    status_code = 400

class UnknownTagError(CheckinError):
    """Raised when a tag is not bound to any attendee."""
    status_code = 404

class InvalidLocationError(CheckinError):
    """Raised when a scanner reports a location code we do not handle."""
    status_code = 400

class InvalidImportError(CheckinError):
    """Raised when an uploaded attendee file cannot be read."""
    status_code = 400
