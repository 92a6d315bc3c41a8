from services.booking.domain.enum import BookingStatus
from services.booking.domain.event import BookingStatusChanged
from services.booking.domain.value_object.booking_id import BookingId
from services.booking.domain.value_object.booking_period import BookingPeriod
from services.shared.domain import (
    AggregateRoot,
    BusinessRuleViolationException,
    ItemId,
    UserId,
)


class Booking(AggregateRoot[BookingId]):
    """アイテムの貸し出し予約"""

    def __init__(
        self,
        id: BookingId,
        item_id: ItemId,
        booker_id: UserId,
        period: BookingPeriod,
        status: BookingStatus = BookingStatus.WAITING,
    ) -> None:
        super().__init__(id)

        self._item_id = item_id
        self._booker_id = booker_id
        self._period = period
        self._status = status

    @property
    def item_id(self) -> ItemId:
        return self._item_id

    @property
    def booker_id(self) -> UserId:
        return self._booker_id

    @property
    def period(self) -> BookingPeriod:
        return self._period

    @property
    def status(self) -> BookingStatus:
        return self._status

    def is_booked_by(self, user_id: UserId) -> bool:
        return self._booker_id == user_id

    def decide(self, approved: bool) -> None:
        """所有者の判断を反映する（WAITING からの一度きりの遷移）"""
        if self._status != BookingStatus.WAITING:
            raise BusinessRuleViolationException(
                "The status of this booking has already been changed"
            )
        self._change_status(
            BookingStatus.APPROVED if approved else BookingStatus.REJECTED
        )

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.CANCELED:
            return
        if self._status == BookingStatus.REJECTED:
            raise BusinessRuleViolationException("Cannot cancel a rejected booking")
        self._change_status(BookingStatus.CANCELED)

    def _change_status(self, status: BookingStatus) -> None:
        previous = self._status
        self._status = status
        self.add_domain_event(
            BookingStatusChanged(booking_id=self.id, previous=previous, current=status)
        )
