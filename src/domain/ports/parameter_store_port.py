"""
Port (interface) for parameter stores.
Infrastructure adapters (e.g. SSMParameterStore) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence

from src.domain.entities.parameter import ParameterMap, ParameterRequest, ParameterWriteRequest

# Receives recoverable errors; may be a plain function or a coroutine function.
ErrorHandler = Callable[[Exception], Any]


class IParameterStore(ABC):
    @abstractmethod
    async def get(self, parameters: Sequence[ParameterRequest]) -> ParameterMap:
        """Resolve every requested name to its text, persisting to targets.

        Raises:
            MissingParameterError: if a name has no remote value and no default.
            PersistenceError: if writing a target file fails.
        """
        ...

    @abstractmethod
    async def put(self, parameter: ParameterWriteRequest) -> str:
        """Write one parameter and return the value the store reports afterwards."""
        ...

    @abstractmethod
    async def delete(self, parameters: Sequence[ParameterRequest]) -> list[str]:
        """Delete every requested name and return the names confirmed deleted.

        Raises:
            DeleteFailedError: if the store did not confirm a name.
        """
        ...
