from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 状態変更は必ず集約ルートのメソッドを経由する
    - 状態変更の結果はドメインイベントとして記録する
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list[object] = []

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを記録する"""
        self._domain_events.append(event)

    def flush_domain_events(self) -> list[object]:
        """記録済みのドメインイベントを取り出してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
