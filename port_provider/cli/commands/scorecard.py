# -*- coding: utf-8 -*-

import click

from port_provider.cli.commands.main import (
    cli_start,
    console,
    load_model_file,
    print_state,
    run_with_client,
)
from port_provider.clients.port.client import PortClient
from port_provider.resources.scorecard import ScorecardModel, ScorecardResource


@cli_start.group()
def scorecard() -> None:
    """
    Manage blueprint scorecards.
    """


@scorecard.command("get")
@click.argument("blueprint", type=str)
@click.argument("identifier", type=str)
@click.pass_context
def get_scorecard(ctx: click.Context, blueprint: str, identifier: str) -> None:
    """
    Read the scorecard IDENTIFIER of BLUEPRINT and print its state.
    """
    state = run_with_client(
        ctx,
        lambda port_client: ScorecardResource(port_client).read(
            ScorecardModel(identifier=identifier, blueprint=blueprint)
        ),
    )
    print_state(state)


@scorecard.command("apply")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def apply_scorecard(ctx: click.Context, path: str) -> None:
    """
    Create the scorecard described by the yaml file at PATH, or update it if it exists.
    """
    plan = load_model_file(path, ScorecardModel)

    async def apply(port_client: PortClient) -> ScorecardModel:
        resource = ScorecardResource(port_client)
        state = await resource.read(plan)
        if state is None:
            return await resource.create(plan)
        return await resource.update(plan, state)

    print_state(run_with_client(ctx, apply))


@scorecard.command("delete")
@click.argument("blueprint", type=str)
@click.argument("identifier", type=str)
@click.pass_context
def delete_scorecard(ctx: click.Context, blueprint: str, identifier: str) -> None:
    """
    Delete the scorecard IDENTIFIER of BLUEPRINT.
    """
    run_with_client(
        ctx,
        lambda port_client: ScorecardResource(port_client).delete(
            ScorecardModel(identifier=identifier, blueprint=blueprint)
        ),
    )
    console.print(f"Scorecard `{identifier}` of blueprint `{blueprint}` deleted")
