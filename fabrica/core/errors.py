class FabricaError(Exception):
    """Base class for construction failures surfaced to callers."""


class QueryValidationError(FabricaError, ValueError):
    """
    Raised by `QueryBuilder.finalize` for the first invalid input recorded
    while the chain was being expressed.
    """

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = tuple(errors or (message,))


class InitializationFailure(FabricaError, RuntimeError):
    """A lazily constructed shared instance could not be built."""

    def __init__(self, name: str, cause: BaseException):
        super().__init__(f"Initialization of '{name}' failed: {cause}")
        self.name = name
        self.cause = cause
