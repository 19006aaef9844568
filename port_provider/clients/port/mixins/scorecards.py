from urllib.parse import quote_plus

import httpx
from loguru import logger

from port_provider.clients.port.authentication import PortAuthentication
from port_provider.clients.port.utils import parse_port_body
from port_provider.core.models import Scorecard
from port_provider.exceptions.clients import PortDecodingError


class ScorecardClientMixin:
    def __init__(self, auth: PortAuthentication, client: httpx.AsyncClient):
        self.auth = auth
        self.client = client

    def _scorecards_url(self, blueprint: str) -> str:
        return f"{self.auth.api_url}/blueprints/{quote_plus(blueprint)}/scorecards"

    async def read_scorecard(self, blueprint: str, identifier: str) -> Scorecard:
        logger.info(f"Reading scorecard: {identifier} of blueprint: {blueprint}")
        response = await self.client.get(
            f"{self._scorecards_url(blueprint)}/{quote_plus(identifier)}",
            headers=await self.auth.headers(),
        )
        body = parse_port_body(response, "read scorecard")
        if body.scorecard is None:
            raise PortDecodingError("read scorecard", response.text)
        return body.scorecard

    async def create_scorecard(self, scorecard: Scorecard) -> Scorecard:
        logger.info(
            f"Creating scorecard: {scorecard.identifier} of blueprint: {scorecard.blueprint}"
        )
        response = await self.client.post(
            self._scorecards_url(scorecard.blueprint or ""),
            json=scorecard.to_request_body(),
            headers=await self.auth.headers(),
        )
        body = parse_port_body(response, "create scorecard")
        return body.scorecard or scorecard

    async def update_scorecard(self, scorecard: Scorecard) -> Scorecard:
        logger.info(
            f"Updating scorecard: {scorecard.identifier} of blueprint: {scorecard.blueprint}"
        )
        response = await self.client.put(
            f"{self._scorecards_url(scorecard.blueprint or '')}/{quote_plus(scorecard.identifier)}",
            json=scorecard.to_request_body(),
            headers=await self.auth.headers(),
        )
        body = parse_port_body(response, "update scorecard")
        return body.scorecard or scorecard

    async def delete_scorecard(self, blueprint: str, identifier: str) -> None:
        logger.info(f"Deleting scorecard: {identifier} of blueprint: {blueprint}")
        response = await self.client.delete(
            f"{self._scorecards_url(blueprint)}/{quote_plus(identifier)}",
            headers=await self.auth.headers(),
        )
        parse_port_body(response, "delete scorecard")
