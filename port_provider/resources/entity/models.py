from pydantic import BaseModel, Extra


class ArrayPropsModel(BaseModel, extra=Extra.forbid):
    string_items: dict[str, list[str]] | None = None
    number_items: dict[str, list[float]] | None = None
    boolean_items: dict[str, list[bool]] | None = None
    # Every item is a JSON encoded object
    object_items: dict[str, list[str]] | None = None


class EntityPropertiesModel(BaseModel, extra=Extra.forbid):
    string_props: dict[str, str] | None = None
    number_props: dict[str, float] | None = None
    boolean_props: dict[str, bool] | None = None
    # JSON encoded, the configuration grammar has no arbitrary nested type
    object_props: dict[str, str] | None = None
    array_props: ArrayPropsModel | None = None

    def property_names(self) -> list[str]:
        containers = [
            self.string_props,
            self.number_props,
            self.boolean_props,
            self.object_props,
        ]
        if self.array_props:
            containers += [
                self.array_props.string_items,
                self.array_props.number_items,
                self.array_props.boolean_items,
                self.array_props.object_items,
            ]
        return [name for container in containers for name in container or {}]


class RelationModel(BaseModel, extra=Extra.forbid):
    single_relations: dict[str, str] | None = None
    many_relations: dict[str, list[str]] | None = None


class EntityModel(BaseModel, extra=Extra.forbid):
    id: str | None = None
    identifier: str
    blueprint: str
    title: str | None = None
    icon: str | None = None
    run_id: str | None = None
    teams: list[str] | None = None
    properties: EntityPropertiesModel | None = None
    relations: RelationModel | None = None
    created_at: str | None = None
    created_by: str | None = None
    updated_at: str | None = None
    updated_by: str | None = None
