from .models import ArrayPropsModel, EntityModel, EntityPropertiesModel, RelationModel
from .refresh_state import refresh_entity_state
from .resource import EntityResource
from .to_body import entity_model_to_port_body

__all__ = [
    "ArrayPropsModel",
    "EntityModel",
    "EntityPropertiesModel",
    "EntityResource",
    "RelationModel",
    "entity_model_to_port_body",
    "refresh_entity_state",
]
