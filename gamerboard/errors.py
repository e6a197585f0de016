"""Domain errors raised by the registry, score ledger and ranking services."""


class GamerboardError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(GamerboardError):
    pass


class DuplicateKeyError(GamerboardError):
    pass


class NotFoundError(GamerboardError):
    pass


class InvalidEventError(GamerboardError):
    pass


class StorageError(GamerboardError):
    pass
