class NotFoundError(LookupError):
    """A point lookup found no row for the given primary key."""

    entity = "Entity"

    def __init__(self, pk: int):
        self.id = pk
        super().__init__(f"{self.entity} {pk} not found")


class TodoNotFoundError(NotFoundError):
    entity = "Todo"


class DatabaseUnavailableError(RuntimeError):
    """The database could not be reached or prepared at startup."""
