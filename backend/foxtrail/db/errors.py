"""Store exception types."""


class StoreError(Exception):
    """Base class for itinerary store failures."""

    pass


class MalformedPersistedStateError(StoreError):
    """Backing document exists but cannot be parsed."""

    pass


class PersistenceWriteError(StoreError):
    """Full-document write failed; in-memory state may diverge from disk."""

    pass
