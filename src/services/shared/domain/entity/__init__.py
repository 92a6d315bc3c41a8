from .aggregate_root import AggregateRoot
from .entity import Entity

__all__ = ["AggregateRoot", "Entity"]
