from typing import Iterable

from services.booking.domain.port import ItemCatalog, UserDirectory
from services.booking.domain.value_object import BookableItem
from services.shared.domain import ItemId, UserId


class InMemoryUserDirectory(UserDirectory):
    """メモリ上のユーザー一覧（ローカル実行・テスト用）"""

    def __init__(self, user_ids: Iterable[UserId] = ()) -> None:
        self._user_ids = set(user_ids)

    def add(self, user_id: UserId) -> None:
        self._user_ids.add(user_id)

    def exists(self, user_id: UserId) -> bool:
        return user_id in self._user_ids


class InMemoryItemCatalog(ItemCatalog):
    """メモリ上のアイテム一覧（ローカル実行・テスト用）"""

    def __init__(self, items: Iterable[BookableItem] = ()) -> None:
        self._items = {item.id: item for item in items}

    def add(self, item: BookableItem) -> None:
        self._items[item.id] = item

    def find_by_id(self, item_id: ItemId) -> BookableItem | None:
        return self._items.get(item_id)

    def item_ids_owned_by(self, owner_id: UserId) -> list[ItemId]:
        return sorted(
            item.id for item in self._items.values() if item.owner_id == owner_id
        )
