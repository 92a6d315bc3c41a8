from dataclasses import dataclass

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object.booking_id import BookingId
from services.shared.domain import ItemId, UserId


@dataclass(frozen=True)
class BookingRequested:
    """予約が申請された"""

    booking_id: BookingId
    item_id: ItemId
    booker_id: UserId


@dataclass(frozen=True)
class BookingStatusChanged:
    """予約ステータスが変更された"""

    booking_id: BookingId
    previous: BookingStatus
    current: BookingStatus
