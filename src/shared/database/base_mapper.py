import abc
from typing import Generic, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """
    Two-way translation between a pydantic domain model and its SQLAlchemy entity.

    Mappers are stateless; both directions are static so they can be registered
    directly in an EntityMapper without an instance.
    """

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        """Build a (transient) entity carrying the model's column values."""

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        """Project a loaded entity into its domain model. Relationships must already be loaded."""
