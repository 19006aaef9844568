from urllib.parse import quote_plus

import httpx
from loguru import logger

from port_provider.clients.port.authentication import PortAuthentication
from port_provider.clients.port.utils import parse_port_body
from port_provider.core.models import Blueprint
from port_provider.exceptions.clients import PortDecodingError


class BlueprintClientMixin:
    def __init__(self, auth: PortAuthentication, client: httpx.AsyncClient):
        self.auth = auth
        self.client = client

    async def read_blueprint(self, identifier: str) -> Blueprint:
        logger.info(f"Fetching blueprint with id: {identifier}")
        response = await self.client.get(
            f"{self.auth.api_url}/blueprints/{quote_plus(identifier)}",
            headers=await self.auth.headers(),
        )
        body = parse_port_body(response, "read blueprint")
        if body.blueprint is None:
            raise PortDecodingError("read blueprint", response.text)
        return body.blueprint
