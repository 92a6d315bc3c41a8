from datetime import timedelta

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookableItem, BookingId, BookingPeriod
from services.booking.infrastructure import (
    InMemoryBookingRepository,
    InMemoryItemCatalog,
    InMemoryUserDirectory,
)
from services.shared.domain import IsoDateTime, ItemId, UserId

OWNER_ID = 1
BOOKER_ID = 2
STRANGER_ID = 3
ITEM_ID = 1


@pytest.fixture
def create_booking(now):
    """Booking を生成する Factory fixture（Factories as fixtures パターン）

    start / end は基準時刻からの分数で指定する。
    """

    def _factory(
        booking_id: int = 1,
        item_id: int = ITEM_ID,
        booker_id: int = BOOKER_ID,
        start: int = 5,
        end: int = 10,
        status: BookingStatus = BookingStatus.WAITING,
    ) -> Booking:
        return Booking(
            id=BookingId(value=booking_id),
            item_id=ItemId(value=item_id),
            booker_id=UserId(value=booker_id),
            period=BookingPeriod(
                start=IsoDateTime(now.value + timedelta(minutes=start)),
                end=IsoDateTime(now.value + timedelta(minutes=end)),
            ),
            status=status,
        )

    return _factory


@pytest.fixture
def repository():
    return InMemoryBookingRepository()


@pytest.fixture
def users():
    return InMemoryUserDirectory(
        [UserId(value=OWNER_ID), UserId(value=BOOKER_ID), UserId(value=STRANGER_ID)]
    )


@pytest.fixture
def items():
    return InMemoryItemCatalog(
        [
            BookableItem(
                id=ItemId(value=ITEM_ID),
                owner_id=UserId(value=OWNER_ID),
                available=True,
            )
        ]
    )


@pytest.fixture
def store(repository, create_booking):
    """予約を採番してリポジトリへ保存するヘルパー"""

    def _store(**kwargs) -> Booking:
        booking_id = repository.next_identity()
        booking = create_booking(booking_id=booking_id.value, **kwargs)
        repository.save(booking)
        return booking

    return _store
