from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from services.booking.applications.item_booking_projector import ItemBookings
from services.booking.domain.entity.booking import Booking


class UserRef(BaseModel):
    id: int


class ItemRef(BaseModel):
    id: int


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    id: int
    start: str
    end: str
    status: str
    booker: UserRef
    item: ItemRef


class BookingItemData(BaseModel):
    """アイテム詳細に埋め込む予約データ"""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    start: str
    end: str
    status: str
    booker_id: int = Field(..., serialization_alias="bookerId")


class ItemBookingsData(BaseModel):
    """アイテムごとの前回 / 次回予約"""

    model_config = ConfigDict(populate_by_name=True)

    item_id: int = Field(..., serialization_alias="itemId")
    last_booking: BookingItemData | None = Field(
        default=None, serialization_alias="lastBooking"
    )
    next_booking: BookingItemData | None = Field(
        default=None, serialization_alias="nextBooking"
    )


def _to_booking_data(booking: Booking) -> BookingData:
    return BookingData(
        id=booking.id.value,
        start=str(booking.period.start),
        end=str(booking.period.end),
        status=booking.status.value,
        booker=UserRef(id=booking.booker_id.value),
        item=ItemRef(id=booking.item_id.value),
    )


def to_response(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return _to_booking_data(booking).model_dump()


def to_list_response(bookings: list[Booking]) -> list[dict]:
    return [to_response(booking) for booking in bookings]


def _to_item_data(booking: Booking | None) -> BookingItemData | None:
    if booking is None:
        return None
    return BookingItemData(
        id=booking.id.value,
        start=str(booking.period.start),
        end=str(booking.period.end),
        status=booking.status.value,
        booker_id=booking.booker_id.value,
    )


def to_item_bookings_response(item_id: int, projection: ItemBookings) -> dict:
    """前回 / 次回予約をレスポンス辞書に変換する"""
    return ItemBookingsData(
        item_id=item_id,
        last_booking=_to_item_data(projection.last),
        next_booking=_to_item_data(projection.next),
    ).model_dump(by_alias=True)
