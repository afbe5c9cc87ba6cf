class ListkeeperError(Exception):
    """Base exception for listkeeper errors."""


class NotFoundError(ListkeeperError):
    """Raised when a collection's backing file does not exist."""


class ParseError(ListkeeperError):
    """Raised when a backing file is not valid JSON of the expected shape."""


class StorageIOError(ListkeeperError):
    """Raised when reading or writing a collection file fails at the OS level."""


class UnknownCollectionError(ListkeeperError):
    """Raised when a database is asked for an entity kind it does not hold."""


class GuardReleasedError(ListkeeperError):
    """Raised when a collection guard is used after its lock was released."""


class InvalidRecordError(ListkeeperError):
    """Raised when a patched record no longer validates against its model."""
