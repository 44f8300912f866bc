"""
Infrastructure adapter: AWS Systems Manager Parameter Store → IParameterStore.

All boto3 / botocore details are confined here. Each batch issues exactly one
remote call; the per-parameter work that follows (default resolution, file
writes, file removals) fans out with asyncio.gather. Every item is allowed to
settle, then the first failure in batch order rejects the whole batch.

boto3 clients are blocking, so calls are awaited through asyncio.to_thread.
A boto3 client is safe to share between threads, which lets concurrent
batches reuse one pooled connection set.
"""

import asyncio
import inspect
import logging
import os
from dataclasses import dataclass
from typing import Any, Awaitable, Iterable, Optional, Sequence, TypeVar

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from src.domain.entities.parameter import ParameterMap, ParameterRequest, ParameterWriteRequest
from src.domain.exceptions import DeleteFailedError, MissingParameterError, TransportError
from src.domain.ports.parameter_store_port import ErrorHandler, IParameterStore
from src.infrastructure.filesystem.durable_file import remove_file, write_durably

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (BotoCoreError, ClientError)

T = TypeVar("T")


def log_error(exc: Exception) -> None:
    """Default error handler: log and carry on."""
    logger.error("Parameter store error: %s", exc)


async def _settle(coros: Iterable[Awaitable[T]]) -> list[T]:
    """Run *coros* concurrently, wait for all, then raise the first failure in batch order."""
    results = await asyncio.gather(*coros, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


@dataclass
class SSMOptions:
    """
    region:   Region to query; falls back to AWS_DEFAULT_REGION.
    client:   Externally constructed boto3 SSM client, used verbatim if set.
    on_error: Receives recoverable errors (remote read failures, file close
              failures). Defaults to log_error.
    """

    region: Optional[str] = None
    client: Any = None
    on_error: Optional[ErrorHandler] = None


class SSMParameterStore(IParameterStore):
    """Batch get/put/delete against SSM Parameter Store with local file sync."""

    def __init__(
        self,
        options: Optional[SSMOptions] = None,
        client_config: Optional[Config] = None,
    ) -> None:
        self._options = options or SSMOptions()
        self._on_error = self._options.on_error or log_error
        if self._options.client is not None:
            self._client = self._options.client
        else:
            self._client = boto3.client(
                "ssm",
                region_name=self._options.region
                or os.environ.get("AWS_DEFAULT_REGION", "us-east-1"),
                # botocore's urllib3 pool reuses HTTP connections across calls;
                # tcp_keepalive stops idle pooled sockets from being dropped
                config=client_config or Config(tcp_keepalive=True),
            )

    @property
    def client(self) -> Any:
        return self._client

    # ------------------------------------------------------------------
    # IParameterStore interface
    # ------------------------------------------------------------------

    async def get(self, parameters: Sequence[ParameterRequest]) -> ParameterMap:
        """Fetch all names in one call, falling back to defaults.

        A failing remote call is reported through on_error and the batch is
        resolved from defaults alone.
        """
        if not parameters:
            return {}
        names = [p.name for p in parameters]
        logger.debug("GetParameters for %d names", len(names))
        try:
            response = await asyncio.to_thread(
                self._client.get_parameters,
                Names=names,
                # only decrypts SecureString values
                WithDecryption=True,
            )
        except _REMOTE_ERRORS as exc:
            error = TransportError("GetParameters", exc)
            error.__cause__ = exc
            await self._report(error)
            response = {"Parameters": []}

        values = {
            item["Name"]: item.get("Value")
            for item in response.get("Parameters", [])
        }
        pairs = await _settle(self._resolve(parameter, values) for parameter in parameters)
        return dict(pairs)

    async def put(self, parameter: ParameterWriteRequest) -> str:
        """Write one value, then re-read it through get()."""
        request = {
            "Name": parameter.name,
            "Value": parameter.content,
            "Type": "SecureString" if parameter.encrypted else "String",
            "Overwrite": parameter.overwrite,
        }
        if parameter.key_id:
            request["KeyId"] = parameter.key_id
        if parameter.description:
            request["Description"] = parameter.description

        logger.debug("PutParameter %s (%s)", parameter.name, request["Type"])
        try:
            await asyncio.to_thread(self._client.put_parameter, **request)
        except _REMOTE_ERRORS as exc:
            raise TransportError("PutParameter", exc) from exc
        return (await self.get([parameter]))[parameter.name]

    async def delete(self, parameters: Sequence[ParameterRequest]) -> list[str]:
        """Delete all names in one call and remove their local targets."""
        if not parameters:
            return []
        names = [p.name for p in parameters]
        logger.debug("DeleteParameters for %d names", len(names))
        try:
            response = await asyncio.to_thread(self._client.delete_parameters, Names=names)
        except _REMOTE_ERRORS as exc:
            raise TransportError("DeleteParameters", exc) from exc

        deleted = set(response.get("DeletedParameters", []))
        return await _settle(
            self._confirm_deleted(parameter, deleted) for parameter in parameters
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _resolve(
        self, parameter: ParameterRequest, values: dict[str, Optional[str]]
    ) -> tuple[str, str]:
        # empty remote values fall back to the default; empty defaults count as absent
        text = values.get(parameter.name) or parameter.default
        if not text:
            raise MissingParameterError(parameter.name)
        if parameter.target:
            await write_durably(parameter.target, text, on_close_error=self._report)
        return parameter.name, text

    async def _confirm_deleted(self, parameter: ParameterRequest, deleted: set[str]) -> str:
        if parameter.name not in deleted:
            raise DeleteFailedError(parameter.name)
        if parameter.target:
            await remove_file(parameter.target)
        return parameter.name

    async def _report(self, exc: Exception) -> None:
        outcome = self._on_error(exc)
        if inspect.isawaitable(outcome):
            await outcome
