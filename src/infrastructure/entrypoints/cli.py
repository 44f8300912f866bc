"""
Command-line entry point: composition root for one-off parameter operations.

Wires SSMParameterStore into the application use cases and prints results as
JSON. Region comes from --region, AWS_DEFAULT_REGION, or a local .env file.

Run locally:
    export AWS_PROFILE=<your-profile>
    python -m src.infrastructure.entrypoints.cli get /app/db/password --output-dir secrets
"""

import asyncio
import json
import logging
import os
from typing import Annotated, Any, Coroutine, Optional

import typer
from dotenv import load_dotenv

load_dotenv()

from src.application.use_cases.delete_parameters import DeleteParametersUseCase
from src.application.use_cases.fetch_parameters import FetchParametersUseCase
from src.application.use_cases.put_parameter import PutParameterUseCase
from src.domain.entities.parameter import ParameterRequest, ParameterWriteRequest
from src.domain.exceptions import ParameterStoreError
from src.infrastructure.logging_config import configure_logging
from src.infrastructure.ssm.ssm_parameter_store import SSMOptions, SSMParameterStore

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Batch get, put and delete AWS SSM Parameter Store values.",
    no_args_is_help=True,
)

OutputDirOption = Annotated[
    Optional[str],
    typer.Option("--output-dir", "-o", help="Directory mirroring parameter names as files."),
]


@app.callback()
def main(
    ctx: typer.Context,
    region: Annotated[
        Optional[str],
        typer.Option(envvar="AWS_DEFAULT_REGION", help="AWS region to query."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
) -> None:
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"region": region}


def _build_store(ctx: typer.Context) -> SSMParameterStore:
    return SSMParameterStore(SSMOptions(region=ctx.obj["region"]))


def _target_for(output_dir: Optional[str], name: str) -> Optional[str]:
    if not output_dir:
        return None
    return os.path.join(output_dir, name.lstrip("/"))


def _parse_defaults(pairs: Optional[list[str]]) -> dict[str, str]:
    defaults: dict[str, str] = {}
    for pair in pairs or []:
        name, sep, value = pair.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"expected NAME=VALUE, got {pair!r}", param_hint="--default")
        defaults[name] = value
    return defaults


def _run(coro: Coroutine[Any, Any, Any]) -> Any:
    try:
        return asyncio.run(coro)
    except (ParameterStoreError, ValueError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def get(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Parameter names or paths.")],
    output_dir: OutputDirOption = None,
    default: Annotated[
        Optional[list[str]],
        typer.Option("--default", "-d", help="Fallback value as NAME=VALUE (repeatable)."),
    ] = None,
) -> None:
    """Fetch parameters and print them as a JSON object."""
    defaults = _parse_defaults(default)
    parameters = [
        ParameterRequest(
            name=name,
            target=_target_for(output_dir, name),
            default=defaults.get(name),
        )
        for name in names
    ]
    use_case = FetchParametersUseCase(_build_store(ctx))
    result = _run(use_case.execute(parameters))
    typer.echo(json.dumps(result, indent=2, sort_keys=True))


@app.command()
def put(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Parameter name or path.")],
    value: Annotated[str, typer.Argument(help="Value to store.")],
    encrypted: Annotated[bool, typer.Option(help="Store as SecureString.")] = False,
    overwrite: Annotated[bool, typer.Option(help="Replace an existing value.")] = False,
    description: Annotated[Optional[str], typer.Option(help="Parameter description.")] = None,
    key_id: Annotated[Optional[str], typer.Option(help="KMS key id for SecureString.")] = None,
    target: Annotated[Optional[str], typer.Option(help="Also write the value to this file.")] = None,
) -> None:
    """Write one parameter and print the value the store reports back."""
    parameter = ParameterWriteRequest(
        name=name,
        target=target,
        content=value,
        encrypted=encrypted,
        overwrite=overwrite,
        description=description,
        key_id=key_id,
    )
    use_case = PutParameterUseCase(_build_store(ctx))
    typer.echo(_run(use_case.execute(parameter)))


@app.command()
def delete(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Parameter names or paths.")],
    output_dir: OutputDirOption = None,
) -> None:
    """Delete parameters (and their files under --output-dir)."""
    parameters = [
        ParameterRequest(name=name, target=_target_for(output_dir, name)) for name in names
    ]
    use_case = DeleteParametersUseCase(_build_store(ctx))
    deleted = _run(use_case.execute(parameters))
    typer.echo(json.dumps(deleted, indent=2))


if __name__ == "__main__":
    app()
