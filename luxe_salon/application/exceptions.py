class SalonError(RuntimeError):
    """Base class for errors raised by the salon use cases and stores."""
    pass


class LoadError(SalonError):
    """Raised when the service catalog cannot be fetched or has the wrong shape."""
    pass


class NotFoundError(SalonError):
    """Raised when a service id or loyalty card email does not exist."""
    pass


class ConflictError(SalonError):
    """Raised when a loyalty card is already registered for an email."""
    pass


class StorageError(SalonError):
    """Raised when the backing file cannot be read, parsed or written."""
    pass
