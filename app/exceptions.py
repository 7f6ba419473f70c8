class ObjectNotFoundError(Exception):
    """Raised when no document exists for the requested identifier."""

    def __init__(self, id: object) -> None:
        self.id = id
        super().__init__(f"Resource not found. Id {id}")
