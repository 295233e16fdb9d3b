class DuplicateKeyError(Exception):
    """A write was rejected by a UNIQUE constraint.

    ``key`` is the constraint name (e.g. ``uq_employees_email``) so callers can
    tell which uniqueness rule collided.
    """

    def __init__(self, key: str):
        super().__init__(f"Duplicate entry for key {key!r}")
        self.key = key
