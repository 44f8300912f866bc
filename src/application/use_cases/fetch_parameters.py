"""
Use-case: resolve a batch of parameters, optionally persisting each to a file.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from typing import Sequence

from src.domain.entities.parameter import ParameterMap, ParameterRequest, ensure_unique_names
from src.domain.ports.parameter_store_port import IParameterStore


class FetchParametersUseCase:
    def __init__(self, store: IParameterStore) -> None:
        self._store = store

    async def execute(self, parameters: Sequence[ParameterRequest]) -> ParameterMap:
        """Fetch every requested parameter.

        Raises:
            ValueError: if the batch is empty or repeats a name.
            MissingParameterError: if a name has no value and no default.
            PersistenceError: if a target file cannot be written.
        """
        if not parameters:
            raise ValueError("at least one parameter is required")
        ensure_unique_names(parameters)
        return await self._store.get(parameters)
