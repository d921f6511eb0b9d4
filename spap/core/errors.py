"""
Exception types for the publisher.

A content miss is not an exception. Readers return None for it and the
request handler turns it into a 404. Everything here is fatal for either
the process (configuration) or the request (storage).
"""


class SpapError(Exception):
    """Base class for publisher errors."""
    pass


class ConfigurationError(SpapError):
    """Raised when the contents location is missing or malformed."""
    pass


class StorageError(SpapError):
    """Raised when the object store fails for any reason other than a miss."""
    pass
