from typing import Any
from urllib.parse import quote_plus

import httpx
from loguru import logger

from port_provider.clients.port.authentication import PortAuthentication
from port_provider.clients.port.utils import parse_port_body
from port_provider.core.models import Entity, SearchResult
from port_provider.exceptions.clients import PortDecodingError


class EntityClientMixin:
    def __init__(self, auth: PortAuthentication, client: httpx.AsyncClient):
        self.auth = auth
        self.client = client

    async def read_entity(self, identifier: str, blueprint: str) -> Entity:
        logger.info(f"Reading entity: {identifier} of blueprint: {blueprint}")
        response = await self.client.get(
            f"{self.auth.api_url}/blueprints/{quote_plus(blueprint)}/entities/{quote_plus(identifier)}",
            headers=await self.auth.headers(),
            params={"exclude_calculated_properties": "true"},
        )
        body = parse_port_body(response, "read entity")
        if body.entity is None:
            raise PortDecodingError("read entity", response.text)
        return body.entity

    async def create_entity(self, entity: Entity, run_id: str | None = None) -> Entity:
        """
        Upserts an entity, the identifier is the upsert key.

        :param entity: The entity to write, audit fields are never sent
        :param run_id: An action run to attribute the write to
        :return: The entity as Port stored it
        """
        logger.info(
            f"Upserting entity: {entity.identifier} of blueprint: {entity.blueprint}"
        )
        params = {"upsert": "true"}
        if run_id:
            params["run_id"] = run_id
        response = await self.client.post(
            f"{self.auth.api_url}/blueprints/{quote_plus(entity.blueprint)}/entities",
            json=entity.to_request_body(),
            headers=await self.auth.headers(),
            params=params,
        )
        body = parse_port_body(response, "create entity")
        return body.entity or entity

    async def delete_entity(self, identifier: str, blueprint: str) -> None:
        logger.info(f"Deleting entity: {identifier} of blueprint: {blueprint}")
        response = await self.client.delete(
            f"{self.auth.api_url}/blueprints/{quote_plus(blueprint)}/entities/{quote_plus(identifier)}",
            headers=await self.auth.headers(),
        )
        parse_port_body(response, "delete entity")

    async def search_entities(
        self,
        query: dict[str, Any],
        exclude_calculated_properties: bool = False,
        include: list[str] | None = None,
        exclude: list[str] | None = None,
        attach_title_to_relation: bool = False,
    ) -> SearchResult:
        logger.info(f"Searching entities with query {query}")
        params: dict[str, Any] = {
            "exclude_calculated_properties": str(exclude_calculated_properties).lower(),
            "attach_title_to_relation": str(attach_title_to_relation).lower(),
        }
        if include:
            params["include"] = include
        if exclude:
            params["exclude"] = exclude
        response = await self.client.post(
            f"{self.auth.api_url}/entities/search",
            json=query,
            headers=await self.auth.headers(),
            params=params,
        )
        body = parse_port_body(response, "search entities")
        if body.entities is None:
            raise PortDecodingError("search entities", response.text)
        return SearchResult(
            matching_blueprints=body.matching_blueprints or [],
            entities=body.entities,
        )
