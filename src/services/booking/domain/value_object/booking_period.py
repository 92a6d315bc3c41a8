from dataclasses import dataclass

from services.shared.domain import BusinessRuleViolationException, IsoDateTime


@dataclass(frozen=True)
class BookingPeriod:
    """予約期間（開始日時 + 終了日時）"""

    start: IsoDateTime
    end: IsoDateTime

    def __post_init__(self) -> None:
        if not self.start.is_before(self.end):
            raise BusinessRuleViolationException(
                "The booking start date must be before the end date."
            )

    def has_ended(self, now: IsoDateTime) -> bool:
        """終了済みかどうか（end < now）"""
        return self.end.is_before(now)

    def is_ongoing(self, now: IsoDateTime) -> bool:
        """進行中かどうか（start < now < end）"""
        return self.start.is_before(now) and self.end.is_after(now)
