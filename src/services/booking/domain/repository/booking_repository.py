from abc import abstractmethod
from typing import Iterable

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingCriteria,
    BookingId,
    PageRequest,
)
from services.shared.domain import ItemId, Repository, UserId


def newest_first(bookings: Iterable[Booking]) -> list[Booking]:
    """開始日時の降順に並べる（同時刻は ID の降順）"""
    return sorted(
        bookings,
        key=lambda b: (b.period.start.value, b.id.value),
        reverse=True,
    )


class BookingRepository(Repository[Booking, BookingId]):
    """予約レポジトリ

    一覧系のメソッドはすべて newest_first の順で返す。
    page が None の場合はページングせず全件返す。
    """

    @abstractmethod
    def next_identity(self) -> BookingId:
        """新しい予約IDを採番する"""
        raise NotImplementedError

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """新規に永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """ステータスを更新する

        expected_status を指定した場合、永続化済みのステータスが一致する
        ときだけ書き込み、一致しなければ OptimisticLockException を送出する。
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking_id: BookingId) -> None:
        """予約を削除する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booker(
        self,
        booker_id: UserId,
        criteria: BookingCriteria | None = None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        """予約者で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_items(
        self,
        item_ids: Iterable[ItemId],
        criteria: BookingCriteria | None = None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        """アイテム（複数可）で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_booker_and_item(
        self,
        booker_id: UserId,
        item_id: ItemId,
        criteria: BookingCriteria | None = None,
    ) -> list[Booking]:
        """予約者とアイテムの組で検索"""
        raise NotImplementedError
