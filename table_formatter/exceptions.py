"""
Table formatter exceptions

Base exception hierarchy for the input boundary and the snapshot store.
The extraction and rendering pipeline itself never raises.
"""


class TableFormatterError(Exception):
    """Base exception for all table formatter errors"""
    pass


class InputTooLongError(TableFormatterError):
    """Raw text exceeds the configured maximum length"""

    def __init__(self, max_length: int, actual_length: int):
        self.max_length = max_length
        self.actual_length = actual_length
        super().__init__(f"Input exceeds maximum length of {max_length} characters")


class StorageError(TableFormatterError):
    """Snapshot store error"""
    pass


class DuplicateNameError(StorageError):
    """A snapshot with the same name (ignoring case) already exists"""

    def __init__(self, name: str):
        self.name = name
        super().__init__("A table with this name already exists")


class SnapshotNotFoundError(StorageError):
    """No snapshot exists with the requested id"""

    def __init__(self, snapshot_id: str):
        self.snapshot_id = snapshot_id
        super().__init__(f"Saved table not found: {snapshot_id}")


class PersistenceError(StorageError):
    """The backing store could not be read or written"""
    pass
