from typing import Any, Callable, Dict, Type


class EntityMapper:
    """Dispatches a domain model to the entity factory registered for its type."""

    def __init__(self, entity_mappings: Dict[Type, Callable[[Any], Any]]):
        self.entity_mappings = entity_mappings

    def supports(self, model_type: Type) -> bool:
        return model_type in self.entity_mappings

    def map_to_entity(self, model_instance: Any):
        model_type = type(model_instance)
        if not self.supports(model_type):
            raise ValueError(f"No entity mapping found for model type: {model_type.__name__}")
        return self.entity_mappings[model_type](model_instance)
