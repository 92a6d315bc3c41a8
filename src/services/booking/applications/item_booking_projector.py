from dataclasses import dataclass
from typing import Iterable

from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingCriteria
from services.shared.domain import IsoDateTime, ItemId


@dataclass(frozen=True)
class ItemBookings:
    """アイテムごとの直近の予約（前回 / 次回）"""

    last: Booking | None = None
    next: Booking | None = None


def project(bookings: Iterable[Booking], now: IsoDateTime) -> ItemBookings:
    """1アイテム分の予約から前回 / 次回を求める

    - last: APPROVED / CANCELED のうち終了済み or 進行中で、終了日時が最も遅いもの
    - next: APPROVED / WAITING のうち未開始で、開始日時が最も早いもの
    """
    finished = BookingCriteria.finished_or_ongoing(now)
    upcoming = BookingCriteria.upcoming(now)

    last: Booking | None = None
    next_: Booking | None = None
    for booking in bookings:
        period = booking.period
        if finished.is_satisfied_by(booking) and (
            period.has_ended(now) or period.is_ongoing(now)
        ):
            if last is None or (period.end.value, booking.id.value) > (
                last.period.end.value,
                last.id.value,
            ):
                last = booking
        elif upcoming.is_satisfied_by(booking):
            if next_ is None or (period.start.value, booking.id.value) < (
                next_.period.start.value,
                next_.id.value,
            ):
                next_ = booking
    return ItemBookings(last=last, next=next_)


class ItemBookingProjector:
    """アイテムの前回 / 次回予約を解決する（アイテムサービスから利用）"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def resolve(self, item_id: ItemId, now: IsoDateTime) -> ItemBookings:
        return project(self._repository.find_by_items([item_id]), now)

    def resolve_batch(
        self, item_ids: Iterable[ItemId], now: IsoDateTime
    ) -> dict[ItemId, ItemBookings]:
        """複数アイテムを1回の問い合わせで解決する

        結果は resolve をアイテムごとに呼んだ場合と一致する。
        予約の無いアイテムも空の ItemBookings として含める。
        """
        ids = list(dict.fromkeys(item_ids))
        if not ids:
            return {}

        grouped: dict[ItemId, list[Booking]] = {item_id: [] for item_id in ids}
        for booking in self._repository.find_by_items(ids):
            if booking.item_id in grouped:
                grouped[booking.item_id].append(booking)

        return {item_id: project(bookings, now) for item_id, bookings in grouped.items()}
