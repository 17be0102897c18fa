"""
Error taxonomy.

FetchFailure - a read failed; the affected table/figure is left empty.
WriteFailure - insert/update/delete failed (uniqueness violations included).

Neither is retried. Routes let them bubble up to the handlers registered
in app.main, which log and turn them into a JSON detail message.
"""


class PlacementError(Exception):
    """Base error carrying a human-readable message and the attempted action."""

    def __init__(self, message: str, action: str = None, table: str = None):
        super().__init__(message)
        self.message = message
        self.action = action
        self.table = table


class FetchFailure(PlacementError):
    pass


class WriteFailure(PlacementError):
    def __init__(self, message: str, action: str = None, table: str = None, conflict: bool = False):
        super().__init__(message, action=action, table=table)
        self.conflict = conflict
