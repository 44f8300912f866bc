"""
Shared test fixtures.

FakeSSMClient mimics the three SSM Parameter Store calls the adapter uses,
backed by a dict, so round-trip and idempotence behaviour can be exercised
without AWS credentials.
"""

from typing import Optional

import pytest
from botocore.exceptions import ClientError

from src.infrastructure.ssm.ssm_parameter_store import SSMOptions, SSMParameterStore


def client_error(code: str, operation: str, message: str = "boom") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, operation)


class FakeSSMClient:
    def __init__(self, parameters: Optional[dict] = None) -> None:
        self.parameters: dict[str, str] = dict(parameters or {})
        self.calls: list[tuple[str, dict]] = []
        self.read_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None

    def get_parameters(self, Names, WithDecryption=False):
        self.calls.append(("get_parameters", {"Names": list(Names), "WithDecryption": WithDecryption}))
        if self.read_error is not None:
            raise self.read_error
        found = [name for name in Names if name in self.parameters]
        return {
            "Parameters": [
                {"Name": name, "Value": self.parameters[name], "Type": "String"}
                for name in found
            ],
            "InvalidParameters": [name for name in Names if name not in self.parameters],
        }

    def put_parameter(self, Name, Value, Type="String", Overwrite=False, **kwargs):
        self.calls.append(
            ("put_parameter", {"Name": Name, "Value": Value, "Type": Type, "Overwrite": Overwrite, **kwargs})
        )
        if Name in self.parameters and not Overwrite:
            raise client_error("ParameterAlreadyExists", "PutParameter", "The parameter already exists.")
        self.parameters[Name] = Value
        return {"Version": 1, "Tier": "Standard"}

    def delete_parameters(self, Names):
        self.calls.append(("delete_parameters", {"Names": list(Names)}))
        if self.delete_error is not None:
            raise self.delete_error
        deleted = [name for name in Names if self.parameters.pop(name, None) is not None]
        return {
            "DeletedParameters": deleted,
            "InvalidParameters": [name for name in Names if name not in deleted],
        }


@pytest.fixture
def fake_client():
    """Fresh in-memory SSM client for each test"""
    return FakeSSMClient({"/app/db/user": "admin", "/app/db/password": "s3cret"})


@pytest.fixture
def reported_errors():
    """Errors received by the store's on_error callback"""
    return []


@pytest.fixture
def store(fake_client, reported_errors):
    """SSMParameterStore wired to the fake client"""
    return SSMParameterStore(SSMOptions(client=fake_client, on_error=reported_errors.append))


@pytest.fixture
def make_client_error():
    """Factory for botocore ClientError instances"""
    return client_error
