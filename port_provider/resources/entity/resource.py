from loguru import logger

from port_provider.clients.port.client import PortClient
from port_provider.exceptions.clients import PortApplicationError
from port_provider.resources.entity.models import EntityModel
from port_provider.resources.entity.refresh_state import refresh_entity_state
from port_provider.resources.entity.to_body import entity_model_to_port_body


class EntityResource:
    def __init__(self, port_client: PortClient):
        self.port_client = port_client

    async def _write(self, plan: EntityModel) -> EntityModel:
        # Mapping errors are raised before any request is sent
        entity = entity_model_to_port_body(plan)
        written = await self.port_client.create_entity(entity, plan.run_id)
        blueprint = await self.port_client.read_blueprint(plan.blueprint)
        state = refresh_entity_state(written, blueprint)
        state.run_id = plan.run_id
        return state

    async def create(self, plan: EntityModel) -> EntityModel:
        return await self._write(plan)

    async def read(self, state: EntityModel) -> EntityModel | None:
        try:
            blueprint = await self.port_client.read_blueprint(state.blueprint)
            entity = await self.port_client.read_entity(
                state.identifier, state.blueprint
            )
        except PortApplicationError as e:
            if e.is_not_found:
                logger.warning(
                    f"Entity: {state.identifier} of blueprint: {state.blueprint} no longer exists"
                )
                return None
            raise

        refreshed = refresh_entity_state(entity, blueprint)
        refreshed.run_id = state.run_id
        return refreshed

    async def update(self, plan: EntityModel, state: EntityModel) -> EntityModel:
        refreshed = await self._write(plan)
        if (plan.identifier, plan.blueprint) != (state.identifier, state.blueprint):
            logger.info(
                f"Entity: {state.identifier} of blueprint: {state.blueprint} was replaced by "
                f"entity: {plan.identifier} of blueprint: {plan.blueprint}, deleting it"
            )
            await self.port_client.delete_entity(state.identifier, state.blueprint)
        return refreshed

    async def delete(self, state: EntityModel) -> None:
        await self.port_client.delete_entity(state.identifier, state.blueprint)
