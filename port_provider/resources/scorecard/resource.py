from loguru import logger

from port_provider.clients.port.client import PortClient
from port_provider.exceptions.clients import PortApplicationError
from port_provider.resources.scorecard.models import ScorecardModel
from port_provider.resources.scorecard.refresh_state import refresh_scorecard_state
from port_provider.resources.scorecard.to_body import scorecard_model_to_port_body


class ScorecardResource:
    def __init__(self, port_client: PortClient):
        self.port_client = port_client

    async def create(self, plan: ScorecardModel) -> ScorecardModel:
        scorecard = scorecard_model_to_port_body(plan)
        created = await self.port_client.create_scorecard(scorecard)
        return refresh_scorecard_state(created, plan.blueprint)

    async def read(self, state: ScorecardModel) -> ScorecardModel | None:
        try:
            scorecard = await self.port_client.read_scorecard(
                state.blueprint, state.identifier
            )
        except PortApplicationError as e:
            if e.is_not_found:
                logger.warning(
                    f"Scorecard: {state.identifier} of blueprint: {state.blueprint} no longer exists"
                )
                return None
            raise
        return refresh_scorecard_state(scorecard, state.blueprint)

    async def update(self, plan: ScorecardModel, state: ScorecardModel) -> ScorecardModel:
        scorecard = scorecard_model_to_port_body(plan)
        if (plan.identifier, plan.blueprint) != (state.identifier, state.blueprint):
            # Scorecards are addressed by blueprint and identifier, a rename is a replacement
            created = await self.port_client.create_scorecard(scorecard)
            await self.port_client.delete_scorecard(state.blueprint, state.identifier)
            return refresh_scorecard_state(created, plan.blueprint)

        updated = await self.port_client.update_scorecard(scorecard)
        return refresh_scorecard_state(updated, plan.blueprint)

    async def delete(self, state: ScorecardModel) -> None:
        await self.port_client.delete_scorecard(state.blueprint, state.identifier)
