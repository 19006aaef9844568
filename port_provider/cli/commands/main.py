# -*- coding: utf-8 -*-
import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Type, TypeVar

import click
import httpx
import yaml
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape

from port_provider.clients.port.client import PortClient
from port_provider.config.settings import LogLevelType
from port_provider.config.utils import load_provider_config
from port_provider.exceptions.base import BasePortProviderException
from port_provider.log.logger_setup import setup_logger

console = Console()

ModelT = TypeVar("ModelT", bound=BaseModel)


@click.group()
@click.option(
    "-l",
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="""Set the logging level of the provider.
            If not specified, the configured level is used.""",
)
@click.pass_context
def cli_start(ctx: click.Context, log_level: LogLevelType | None) -> None:
    # Port provider root command
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level


def load_model_file(path: str, model: Type[ModelT]) -> ModelT:
    try:
        return model.parse_obj(yaml.safe_load(Path(path).read_text("utf-8")))
    except (yaml.YAMLError, ValidationError) as e:
        console.print(
            f"[bold red]Invalid resource file `{escape(path)}`.[/bold red] {escape(str(e))}"
        )
        raise click.exceptions.Exit(1)


def run_with_client(
    ctx: click.Context, operation: Callable[[PortClient], Awaitable[Any]]
) -> Any:
    """
    Run one resource operation against Port and exit with status 1 on any failure.
    """
    try:
        config = load_provider_config()
        setup_logger(
            ctx.obj.get("log_level") or config.log_level,
            *config.get_sensitive_fields_data(),
        )

        async def _run() -> Any:
            async with PortClient.from_config(config) as port_client:
                return await operation(port_client)

        return asyncio.run(_run())
    except (BasePortProviderException, httpx.HTTPError) as e:
        console.print(f"[bold red]{type(e).__name__}:[/bold red] {escape(str(e))}")
        raise click.exceptions.Exit(1)


def print_state(state: BaseModel | None) -> None:
    if state is None:
        console.print("[bold yellow]Resource not found[/bold yellow]")
        return
    console.print_json(data=state.dict(exclude_none=True))
