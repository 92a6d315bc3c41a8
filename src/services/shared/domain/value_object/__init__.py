from .iso_date_time import IsoDateTime
from .item_id import ItemId
from .user_id import UserId

__all__ = ["IsoDateTime", "ItemId", "UserId"]
