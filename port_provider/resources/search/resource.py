import asyncio

from loguru import logger

from port_provider.clients.port.client import PortClient
from port_provider.core.json_value import dump_json, load_json_attribute
from port_provider.core.models import Blueprint
from port_provider.resources.entity.refresh_state import refresh_entity_state
from port_provider.resources.search.models import SearchModel

# Every result needs both to be mapped against its blueprint
REQUIRED_INCLUDE = ["identifier", "blueprint"]


class EntitySearch:
    def __init__(self, port_client: PortClient):
        self.port_client = port_client

    async def _read_blueprints(self, identifiers: set[str]) -> dict[str, Blueprint]:
        blueprints = await asyncio.gather(
            *(self.port_client.read_blueprint(identifier) for identifier in identifiers)
        )
        return {blueprint.identifier: blueprint for blueprint in blueprints}

    async def read(self, config: SearchModel) -> SearchModel:
        """
        Run the search and map every matching entity into its configuration model.

        Entities are refreshed against their own blueprint, each blueprint is fetched once.
        """
        query = load_json_attribute("query", config.query, expect_object=True)
        include = config.include
        if include:
            include = include + [
                field for field in REQUIRED_INCLUDE if field not in include
            ]

        result = await self.port_client.search_entities(
            query,
            exclude_calculated_properties=bool(config.exclude_calculated_properties),
            include=include,
            exclude=config.exclude,
            attach_title_to_relation=bool(config.attach_title_to_relation),
        )
        logger.info(
            f"Search matched {len(result.entities)} entities "
            f"of blueprints: {result.matching_blueprints}"
        )
        blueprints = await self._read_blueprints(
            {entity.blueprint for entity in result.entities if entity.blueprint}
        )

        state = config.copy(deep=True)
        state.id = dump_json(query)
        state.matching_blueprints = result.matching_blueprints
        state.entities = []
        for entity in result.entities:
            if not entity.blueprint:
                logger.warning(
                    f"Skipping search result without blueprint: {entity.identifier}"
                )
                continue
            state.entities.append(
                refresh_entity_state(entity, blueprints[entity.blueprint])
            )
        return state
