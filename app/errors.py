"""Election errors.

Every error aborts the enclosing operation; nothing it staged is committed.
"""


class ElectionError(Exception):
    """Base class for all election errors."""

    def __init__(self, message: str = "Election error"):
        self.message = message
        super().__init__(self.message)


class AuthorizationError(ElectionError):
    """Caller lacks the required privilege, or the voter is not eligible."""

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message)


class StateError(ElectionError):
    """Operation not valid for the current phase or time window."""

    def __init__(self, message: str = "Invalid election state"):
        super().__init__(message)


class DuplicateError(ElectionError):
    """Re-registration, repeated grant or double vote."""

    def __init__(self, message: str = "Duplicate"):
        super().__init__(message)


class ValidationError(ElectionError):
    """Malformed input."""

    def __init__(self, message: str = "Validation error"):
        super().__init__(message)


class AlreadyVotedError(AuthorizationError, DuplicateError):
    """Voter is registered but has already voted."""

    def __init__(self, message: str = "Voter has already voted"):
        ElectionError.__init__(self, message)
