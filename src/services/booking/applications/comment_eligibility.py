from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingCriteria, BookingId
from services.shared.domain import (
    BusinessRuleViolationException,
    IsoDateTime,
    ItemId,
    UserId,
)
from services.shared.utils.logger import get_logger

logger = get_logger("booking-service")


class CommentEligibilityChecker:
    """アイテムにコメントできるかの判定

    利用完了済み（APPROVED / CANCELED かつ end < now）の予約がある
    ユーザーだけがコメントできる。
    """

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def may_comment(
        self, user_id: UserId, item_id: ItemId, now: IsoDateTime
    ) -> BookingId | None:
        """根拠となる予約ID（終了日時が最も早いもの）を返す。無ければ None"""
        bookings = self._repository.find_by_booker_and_item(
            user_id, item_id, BookingCriteria.completed(now)
        )
        if not bookings:
            return None
        first = min(bookings, key=lambda b: (b.period.end.value, b.id.value))
        return first.id

    def ensure_may_comment(
        self, user_id: UserId, item_id: ItemId, now: IsoDateTime
    ) -> BookingId:
        booking_id = self.may_comment(user_id, item_id, now)
        if booking_id is None:
            logger.warning(
                "Comment rejected: no completed booking",
                extra={"user_id": user_id.value, "item_id": item_id.value},
            )
            raise BusinessRuleViolationException(
                "You cannot leave a comment on this item."
            )
        return booking_id
