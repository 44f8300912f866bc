"""Tests for the fetch / put / delete use cases."""

from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.delete_parameters import DeleteParametersUseCase
from src.application.use_cases.fetch_parameters import FetchParametersUseCase
from src.application.use_cases.put_parameter import PutParameterUseCase
from src.domain.entities.parameter import ParameterRequest, ParameterWriteRequest
from src.domain.ports.parameter_store_port import IParameterStore


@pytest.fixture
def mock_store():
    """Parameter store port double"""
    return AsyncMock(spec=IParameterStore)


class TestFetchParametersUseCase:
    @pytest.mark.asyncio
    async def test_delegates_to_store(self, mock_store):
        mock_store.get.return_value = {"a": "1"}
        batch = [ParameterRequest(name="a")]

        result = await FetchParametersUseCase(mock_store).execute(batch)

        assert result == {"a": "1"}
        mock_store.get.assert_awaited_once_with(batch)

    @pytest.mark.asyncio
    async def test_rejects_empty_batch(self, mock_store):
        with pytest.raises(ValueError):
            await FetchParametersUseCase(mock_store).execute([])
        mock_store.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_duplicate_names(self, mock_store):
        batch = [ParameterRequest(name="a"), ParameterRequest(name="a", default="x")]
        with pytest.raises(ValueError, match="duplicate"):
            await FetchParametersUseCase(mock_store).execute(batch)
        mock_store.get.assert_not_awaited()


class TestPutParameterUseCase:
    @pytest.mark.asyncio
    async def test_returns_value_reported_by_store(self, mock_store):
        mock_store.put.return_value = "normalized"
        request = ParameterWriteRequest(name="a", content="raw")

        assert await PutParameterUseCase(mock_store).execute(request) == "normalized"
        mock_store.put.assert_awaited_once_with(request)

    @pytest.mark.asyncio
    async def test_rejects_empty_content(self, mock_store):
        with pytest.raises(ValueError, match="content"):
            await PutParameterUseCase(mock_store).execute(ParameterWriteRequest(name="a", content=""))
        mock_store.put.assert_not_awaited()


class TestDeleteParametersUseCase:
    @pytest.mark.asyncio
    async def test_delegates_to_store(self, mock_store):
        mock_store.delete.return_value = ["a", "b"]
        batch = [ParameterRequest(name="a"), ParameterRequest(name="b")]

        assert await DeleteParametersUseCase(mock_store).execute(batch) == ["a", "b"]
        mock_store.delete.assert_awaited_once_with(batch)

    @pytest.mark.asyncio
    async def test_rejects_duplicate_names(self, mock_store):
        batch = [ParameterRequest(name="a"), ParameterRequest(name="a")]
        with pytest.raises(ValueError):
            await DeleteParametersUseCase(mock_store).execute(batch)
        mock_store.delete.assert_not_awaited()
