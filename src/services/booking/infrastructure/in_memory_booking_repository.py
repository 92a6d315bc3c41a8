import itertools
import threading
from dataclasses import dataclass
from typing import Callable, Iterable

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository, newest_first
from services.booking.domain.value_object import (
    BookingCriteria,
    BookingId,
    BookingPeriod,
    PageRequest,
)
from services.shared.domain import ItemId, UserId
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)


@dataclass(frozen=True)
class _BookingRecord:
    """保存済みの状態（エンティティ本体は共有しない）"""

    id: BookingId
    item_id: ItemId
    booker_id: UserId
    period: BookingPeriod
    status: BookingStatus


class InMemoryBookingRepository(BookingRepository):
    """メモリ上の BookingRepository 実装（ローカル実行・テスト用）

    読み出しのたびに新しいエンティティを返すため、呼び出し側での変更は
    update を呼ぶまで反映されない。
    """

    def __init__(self) -> None:
        self._records: dict[BookingId, _BookingRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def next_identity(self) -> BookingId:
        with self._lock:
            return BookingId(value=next(self._ids))

    def save(self, booking: Booking) -> None:
        with self._lock:
            if booking.id in self._records:
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                )
            self._records[booking.id] = self._to_record(booking)

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        with self._lock:
            record = self._records.get(booking_id)
        return self._to_entity(record) if record is not None else None

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        with self._lock:
            current = self._records.get(booking.id)
            if current is None or (
                expected_status is not None and current.status != expected_status
            ):
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                )
            self._records[booking.id] = self._to_record(booking)

    def delete(self, booking_id: BookingId) -> None:
        with self._lock:
            self._records.pop(booking_id, None)

    def find_by_booker(
        self,
        booker_id: UserId,
        criteria: BookingCriteria | None = None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        return self._select(lambda r: r.booker_id == booker_id, criteria, page)

    def find_by_items(
        self,
        item_ids: Iterable[ItemId],
        criteria: BookingCriteria | None = None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        wanted = set(item_ids)
        return self._select(lambda r: r.item_id in wanted, criteria, page)

    def find_by_booker_and_item(
        self,
        booker_id: UserId,
        item_id: ItemId,
        criteria: BookingCriteria | None = None,
    ) -> list[Booking]:
        return self._select(
            lambda r: r.booker_id == booker_id and r.item_id == item_id, criteria
        )

    def _select(
        self,
        match: Callable[[_BookingRecord], bool],
        criteria: BookingCriteria | None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        criteria = criteria or BookingCriteria()
        with self._lock:
            records = [r for r in self._records.values() if match(r)]
        bookings = newest_first(
            b for b in map(self._to_entity, records) if criteria.is_satisfied_by(b)
        )
        return page.apply(bookings) if page is not None else bookings

    @staticmethod
    def _to_record(booking: Booking) -> _BookingRecord:
        return _BookingRecord(
            id=booking.id,
            item_id=booking.item_id,
            booker_id=booking.booker_id,
            period=booking.period,
            status=booking.status,
        )

    @staticmethod
    def _to_entity(record: _BookingRecord) -> Booking:
        return Booking(
            id=record.id,
            item_id=record.item_id,
            booker_id=record.booker_id,
            period=record.period,
            status=record.status,
        )
