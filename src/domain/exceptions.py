"""
Domain error taxonomy for the parameter store client.
Infrastructure adapters translate SDK and OS failures into these types.
"""


class ParameterStoreError(Exception):
    """Base exception for parameter store failures."""


class TransportError(ParameterStoreError):
    """The call to the remote parameter store failed (network, auth, throttling)."""

    def __init__(self, operation: str, detail: object) -> None:
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation


class MissingParameterError(ParameterStoreError):
    """A requested name has neither a remote value nor a local default."""

    def __init__(self, parameter_name: str) -> None:
        super().__init__(f"{parameter_name} is required but has no value and no default")
        self.parameter_name = parameter_name


class DeleteFailedError(ParameterStoreError):
    """The remote store did not confirm deletion of a requested name."""

    def __init__(self, parameter_name: str) -> None:
        super().__init__(f"{parameter_name} is not deleted")
        self.parameter_name = parameter_name


class PersistenceError(ParameterStoreError):
    """Creating, writing, syncing or removing a local target file failed."""

    def __init__(self, target: str, detail: object) -> None:
        super().__init__(f"{target}: {detail}")
        self.target = target
