# -*- coding: utf-8 -*-

import click

from port_provider.cli.commands.main import (
    cli_start,
    console,
    load_model_file,
    print_state,
    run_with_client,
)
from port_provider.resources.entity import EntityModel, EntityResource
from port_provider.resources.search import EntitySearch, SearchModel


@cli_start.group()
def entity() -> None:
    """
    Manage catalog entities.
    """


@entity.command("get")
@click.argument("blueprint", type=str)
@click.argument("identifier", type=str)
@click.pass_context
def get_entity(ctx: click.Context, blueprint: str, identifier: str) -> None:
    """
    Read the entity IDENTIFIER of BLUEPRINT and print its state.
    """
    state = run_with_client(
        ctx,
        lambda port_client: EntityResource(port_client).read(
            EntityModel(identifier=identifier, blueprint=blueprint)
        ),
    )
    print_state(state)


@entity.command("apply")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def apply_entity(ctx: click.Context, path: str) -> None:
    """
    Create or update the entity described by the yaml file at PATH.
    """
    plan = load_model_file(path, EntityModel)
    state = run_with_client(
        ctx, lambda port_client: EntityResource(port_client).create(plan)
    )
    print_state(state)


@entity.command("delete")
@click.argument("blueprint", type=str)
@click.argument("identifier", type=str)
@click.pass_context
def delete_entity(ctx: click.Context, blueprint: str, identifier: str) -> None:
    """
    Delete the entity IDENTIFIER of BLUEPRINT.
    """
    run_with_client(
        ctx,
        lambda port_client: EntityResource(port_client).delete(
            EntityModel(identifier=identifier, blueprint=blueprint)
        ),
    )
    console.print(f"Entity `{identifier}` of blueprint `{blueprint}` deleted")


@entity.command("search")
@click.argument("query", type=str)
@click.option(
    "--exclude-calculated-properties",
    is_flag=True,
    default=False,
    help="Leave calculated properties out of the results.",
)
@click.option(
    "-i", "--include", multiple=True, help="Property to include in the results."
)
@click.option(
    "-e", "--exclude", multiple=True, help="Property to exclude from the results."
)
@click.option(
    "--attach-title-to-relation",
    is_flag=True,
    default=False,
    help="Attach the related entity title to every relation.",
)
@click.pass_context
def search_entities(
    ctx: click.Context,
    query: str,
    exclude_calculated_properties: bool,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    attach_title_to_relation: bool,
) -> None:
    """
    Search entities matching the JSON encoded QUERY and print them.
    """
    config = SearchModel(
        query=query,
        exclude_calculated_properties=exclude_calculated_properties,
        include=list(include) or None,
        exclude=list(exclude) or None,
        attach_title_to_relation=attach_title_to_relation,
    )
    state = run_with_client(
        ctx, lambda port_client: EntitySearch(port_client).read(config)
    )
    print_state(state)
