from datetime import datetime
from typing import TypedDict

from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingFactory
from services.booking.domain.port import ItemCatalog, UserDirectory
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingId, BookingPeriod
from services.shared.domain import (
    AccessDeniedException,
    BusinessRuleViolationException,
    IsoDateTime,
    ItemId,
    OptimisticLockException,
    ResourceNotFoundException,
    UserId,
)
from services.shared.utils.logger import get_logger

logger = get_logger("booking-service")


class BookingDetails(TypedDict):
    """予約申請の入力データ構造"""

    item_id: int
    start: datetime
    end: datetime


class BookingLifecycleService:
    """予約のライフサイクル（申請・承認/却下・削除・参照）を扱うユースケース

    存在を知られたくない場面のアクセス拒否は ResourceNotFoundException、
    操作者が存在しない / 予約の存在が既知の場合は AccessDeniedException。
    """

    def __init__(
        self,
        repository: BookingRepository,
        factory: BookingFactory,
        users: UserDirectory,
        items: ItemCatalog,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._users = users
        self._items = items

    def create(self, booker_id: UserId, details: BookingDetails) -> Booking:
        """予約を申請する"""
        period = BookingPeriod(
            start=IsoDateTime(details["start"]),
            end=IsoDateTime(details["end"]),
        )
        self._ensure_user_exists(booker_id)

        item_id = ItemId(details["item_id"])
        item = self._items.find_by_id(item_id)
        if item is None:
            logger.warning(
                "Booking requested for missing item",
                extra={"booker_id": booker_id.value, "item_id": item_id.value},
            )
            raise ResourceNotFoundException(f"Item with id {item_id} is not exist.")
        if item.is_owned_by(booker_id):
            logger.warning(
                "Owner tried to book own item",
                extra={"booker_id": booker_id.value, "item_id": item_id.value},
            )
            raise ResourceNotFoundException("Item cannot be reserved.")
        if not item.available:
            logger.warning(
                "Booking requested for unavailable item",
                extra={"booker_id": booker_id.value, "item_id": item_id.value},
            )
            raise BusinessRuleViolationException(
                f"Item with id {item_id} is not available."
            )

        booking = self._factory.create(
            booking_id=self._repository.next_identity(),
            booker_id=booker_id,
            item_id=item_id,
            period=period,
        )
        self._repository.save(booking)
        self._publish(booking)
        return booking

    def update_status(
        self, owner_id: UserId, booking_id: BookingId, approved: bool
    ) -> Booking:
        """アイテム所有者が予約を承認 / 却下する"""
        booking = self._get(booking_id)
        if self._items.owner_of(booking.item_id) != owner_id:
            logger.warning(
                "Status change by non-owner",
                extra={"user_id": owner_id.value, "booking_id": booking_id.value},
            )
            raise ResourceNotFoundException(
                "You haven't access to update this booking."
            )

        expected_status = booking.status
        booking.decide(approved)
        try:
            self._repository.update(booking, expected_status=expected_status)
        except OptimisticLockException as e:
            if self._repository.find_by_id(booking_id) is None:
                logger.warning(
                    "Booking deleted during status change",
                    extra={"booking_id": booking_id.value},
                )
                raise ResourceNotFoundException(
                    f"Booking with id {booking_id} is not exist."
                ) from e
            logger.warning(
                "Concurrent status change detected",
                extra={"booking_id": booking_id.value, "reason": str(e)},
            )
            raise BusinessRuleViolationException(
                "The status of this booking has already been changed"
            ) from e

        self._publish(booking)
        return booking

    def delete(self, user_id: UserId, booking_id: BookingId) -> BookingId:
        """予約者が予約を削除する（存在しなければ何もしない）"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            return booking_id
        if not booking.is_booked_by(user_id):
            logger.warning(
                "Delete by non-booker",
                extra={"user_id": user_id.value, "booking_id": booking_id.value},
            )
            raise AccessDeniedException("You haven't access to delete this booking.")

        self._repository.delete(booking_id)
        logger.info("Booking deleted", extra={"booking_id": booking_id.value})
        return booking_id

    def find_by_id(self, user_id: UserId, booking_id: BookingId) -> Booking:
        """予約者またはアイテム所有者が予約を参照する"""
        booking = self._get(booking_id)
        if booking.is_booked_by(user_id):
            return booking
        if self._items.owner_of(booking.item_id) == user_id:
            return booking

        logger.warning(
            "Booking requested by unrelated user",
            extra={"user_id": user_id.value, "booking_id": booking_id.value},
        )
        raise ResourceNotFoundException("This booking isn't found.")

    def _get(self, booking_id: BookingId) -> Booking:
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(
                f"Booking with id {booking_id} is not exist."
            )
        return booking

    def _ensure_user_exists(self, user_id: UserId) -> None:
        if not self._users.exists(user_id):
            logger.warning("Unknown user", extra={"user_id": user_id.value})
            raise AccessDeniedException(
                "You haven't access to booking. Please, log in."
            )

    def _publish(self, booking: Booking) -> None:
        for event in booking.flush_domain_events():
            logger.info(
                type(event).__name__,
                extra={
                    "booking_id": booking.id.value,
                    "status": booking.status.value,
                },
            )
