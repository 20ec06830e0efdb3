class PatronError(Exception):
    """Base class for patron domain errors."""


class PersonValidationError(PatronError, ValueError):
    """A patron field failed its format rule or was missing."""


class UnsupportedModificationError(PatronError, TypeError):
    """Raised when a read-only view is asked to change."""


class DuplicatePersonError(PatronError):
    pass


class PersonNotFoundError(PatronError, LookupError):
    pass
