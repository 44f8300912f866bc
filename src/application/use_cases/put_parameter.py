"""
Use-case: write a single parameter and return what the store now reports.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from src.domain.entities.parameter import ParameterWriteRequest
from src.domain.ports.parameter_store_port import IParameterStore


class PutParameterUseCase:
    def __init__(self, store: IParameterStore) -> None:
        self._store = store

    async def execute(self, parameter: ParameterWriteRequest) -> str:
        """Raises:
            ValueError: if *content* is empty.
            TransportError: if the store rejects the write (e.g. no overwrite).
        """
        if not parameter.content:
            raise ValueError("parameter content must be a non-empty string")
        return await self._store.put(parameter)
