from .dynamodb_booking_repository import DynamoDBBookingRepository
from .dynamodb_item_catalog import DynamoDBItemCatalog
from .dynamodb_user_directory import DynamoDBUserDirectory
from .in_memory_booking_repository import InMemoryBookingRepository
from .in_memory_directory import InMemoryItemCatalog, InMemoryUserDirectory

__all__ = [
    "DynamoDBBookingRepository",
    "DynamoDBItemCatalog",
    "DynamoDBUserDirectory",
    "InMemoryBookingRepository",
    "InMemoryItemCatalog",
    "InMemoryUserDirectory",
]
