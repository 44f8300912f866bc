"""
Use-case: delete a batch of parameters and their local copies.
Depends only on Domain ports and entities: no infrastructure imports.
"""

from typing import Sequence

from src.domain.entities.parameter import ParameterRequest, ensure_unique_names
from src.domain.ports.parameter_store_port import IParameterStore


class DeleteParametersUseCase:
    def __init__(self, store: IParameterStore) -> None:
        self._store = store

    async def execute(self, parameters: Sequence[ParameterRequest]) -> list[str]:
        if not parameters:
            raise ValueError("at least one parameter is required")
        ensure_unique_names(parameters)
        return await self._store.delete(parameters)
