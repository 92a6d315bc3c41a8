from dataclasses import dataclass

from services.shared.domain import ItemId, UserId


@dataclass(frozen=True)
class BookableItem:
    """予約対象アイテムの読み取り専用ビュー

    アイテムの所有・管理はアイテムサービス側の責務であり、
    予約コンテキストでは参照のみ行う。
    """

    id: ItemId
    owner_id: UserId
    available: bool

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.owner_id == user_id
