from abc import ABC, abstractmethod

from services.booking.domain.value_object import BookableItem
from services.shared.domain import ItemId, UserId


class ItemCatalog(ABC):
    """アイテム管理（外部コンテキスト）への問い合わせ口"""

    @abstractmethod
    def find_by_id(self, item_id: ItemId) -> BookableItem | None:
        """IDでアイテムを検索する"""
        raise NotImplementedError

    @abstractmethod
    def item_ids_owned_by(self, owner_id: UserId) -> list[ItemId]:
        """所有者のアイテムID一覧"""
        raise NotImplementedError

    def owner_of(self, item_id: ItemId) -> UserId | None:
        """アイテムの所有者（アイテムが無ければ None）"""
        item = self.find_by_id(item_id)
        return item.owner_id if item is not None else None
