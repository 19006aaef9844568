from datetime import datetime
from typing import Any

from pydantic import BaseModel, Extra
from pydantic.fields import Field

# Server assigned fields, never part of a request body
AUDIT_FIELDS = {"created_at", "created_by", "updated_at", "updated_by"}


class PortModel(BaseModel):
    def to_request_body(self) -> dict[str, Any]:
        return self.dict(exclude=AUDIT_FIELDS, exclude_none=True, by_alias=True)

    class Config:
        allow_population_by_field_name = True


class AuditedPortModel(PortModel):
    created_at: datetime | None = Field(default=None, alias="createdAt")
    created_by: str | None = Field(default=None, alias="createdBy")
    updated_at: datetime | None = Field(default=None, alias="updatedAt")
    updated_by: str | None = Field(default=None, alias="updatedBy")


class Entity(AuditedPortModel):
    identifier: str | None = None
    title: str | None = None
    blueprint: str | None = None
    icon: str | None = None
    team: list[str] | None = None
    properties: dict[str, Any] | None = None
    relations: dict[str, Any] | None = None


class BlueprintProperty(BaseModel, extra=Extra.allow):
    type: str | None = None
    title: str | None = None
    format: str | None = None
    items: dict[str, Any] | None = None


class BlueprintSchema(BaseModel, extra=Extra.allow):
    properties: dict[str, BlueprintProperty] = {}
    required: list[str] = []


class BlueprintRelation(BaseModel, extra=Extra.allow):
    target: str
    title: str | None = None
    many: bool = False
    required: bool = False


class Blueprint(AuditedPortModel, extra=Extra.allow):
    identifier: str
    title: str | None = None
    icon: str | None = None
    description: str | None = None
    properties_schema: BlueprintSchema = Field(
        default_factory=BlueprintSchema, alias="schema"
    )
    relations: dict[str, BlueprintRelation] = {}
    mirror_properties: dict[str, Any] = Field(default={}, alias="mirrorProperties")
    calculation_properties: dict[str, Any] = Field(
        default={}, alias="calculationProperties"
    )
    aggregation_properties: dict[str, Any] = Field(
        default={}, alias="aggregationProperties"
    )

    def array_item_type(self, property_name: str) -> str | None:
        prop = self.properties_schema.properties.get(property_name)
        if prop is None or not prop.items:
            return None
        return prop.items.get("type")


class Query(BaseModel):
    combinator: str
    conditions: list[dict[str, Any]] = []


class Rule(BaseModel):
    identifier: str
    title: str | None = None
    level: str
    query: Query


class Scorecard(AuditedPortModel):
    identifier: str
    title: str | None = None
    blueprint: str | None = None
    rules: list[Rule] = []


class PortError(BaseModel, extra=Extra.allow):
    ok: bool | None = None
    error: str | None = None
    message: str | None = None
    details: Any = None
    status_code: int | None = Field(default=None, alias="statusCode")


class PortBody(BaseModel, extra=Extra.allow):
    ok: bool = False
    entity: Entity | None = None
    blueprint: Blueprint | None = None
    scorecard: Scorecard | None = None
    # Search results
    entities: list[Entity] | None = None
    matching_blueprints: list[str] | None = Field(
        default=None, alias="matchingBlueprints"
    )


class SearchResult(BaseModel):
    matching_blueprints: list[str] = []
    entities: list[Entity] = []
