class HeapError(Exception):
    """Base class for errors raised by heap operations."""


class HeapOverflowError(HeapError, OverflowError):
    """Insert into a heap that is already at capacity."""


class HeapUnderflowError(HeapError, RuntimeError):
    """Extract or peek on an empty heap."""


class InvalidKeyError(HeapError, ValueError):
    """Increase-key called with a key smaller than the current one."""


class HeapIndexError(HeapError, IndexError):
    """Index outside the valid range ``[0, size)``."""
