from .item_catalog import ItemCatalog
from .user_directory import UserDirectory

__all__ = ["ItemCatalog", "UserDirectory"]
