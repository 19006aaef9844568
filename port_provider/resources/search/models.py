from pydantic import BaseModel, Extra

from port_provider.resources.entity.models import EntityModel


class SearchModel(BaseModel, extra=Extra.forbid):
    id: str | None = None
    # JSON encoded Port search query
    query: str
    exclude_calculated_properties: bool | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    attach_title_to_relation: bool | None = None
    matching_blueprints: list[str] | None = None
    entities: list[EntityModel] | None = None
