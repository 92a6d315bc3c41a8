from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from services.booking.domain.enum import BookerRole, BookingState, BookingStatus
from services.shared.domain import IsoDateTime

if TYPE_CHECKING:
    from services.booking.domain.entity import Booking


@dataclass(frozen=True)
class BookingCriteria:
    """予約の時刻・ステータス条件

    None の項目は条件に含めない。全項目 None なら全件一致。
    比較はすべて厳密（境界値は含まない）。
    """

    start_before: IsoDateTime | None = None
    start_after: IsoDateTime | None = None
    end_before: IsoDateTime | None = None
    end_after: IsoDateTime | None = None
    statuses: frozenset[BookingStatus] | None = None
    excluded_statuses: frozenset[BookingStatus] | None = None

    @classmethod
    def for_state(
        cls, state: BookingState, role: BookerRole, now: IsoDateTime
    ) -> BookingCriteria:
        """一覧の state と現在時刻から条件を組み立てる"""
        if state == BookingState.ALL:
            return cls()
        if state == BookingState.CURRENT:
            return cls(start_before=now, end_after=now)
        if state == BookingState.FUTURE:
            if role == BookerRole.OWNER:
                return cls(
                    start_after=now,
                    excluded_statuses=frozenset({BookingStatus.REJECTED}),
                )
            return cls(start_after=now)
        if state == BookingState.PAST:
            return cls(
                end_before=now,
                excluded_statuses=frozenset(
                    {BookingStatus.WAITING, BookingStatus.REJECTED}
                ),
            )
        if state == BookingState.WAITING:
            return cls(statuses=frozenset({BookingStatus.WAITING}))
        if state == BookingState.REJECTED:
            return cls(statuses=frozenset({BookingStatus.REJECTED}))
        raise ValueError(f"Unhandled booking state: {state}")

    @classmethod
    def finished_or_ongoing(cls, now: IsoDateTime) -> BookingCriteria:
        """終了済み・進行中の判定対象（APPROVED / CANCELED, start < now）"""
        return cls(
            start_before=now,
            statuses=frozenset({BookingStatus.APPROVED, BookingStatus.CANCELED}),
        )

    @classmethod
    def upcoming(cls, now: IsoDateTime) -> BookingCriteria:
        """次回予約の判定対象（APPROVED / WAITING, start > now）"""
        return cls(
            start_after=now,
            statuses=frozenset({BookingStatus.APPROVED, BookingStatus.WAITING}),
        )

    @classmethod
    def completed(cls, now: IsoDateTime) -> BookingCriteria:
        """利用完了済み（APPROVED / CANCELED, end < now）"""
        return cls(
            end_before=now,
            statuses=frozenset({BookingStatus.APPROVED, BookingStatus.CANCELED}),
        )

    def is_satisfied_by(self, booking: Booking) -> bool:
        period = booking.period
        if self.start_before is not None and not period.start.is_before(
            self.start_before
        ):
            return False
        if self.start_after is not None and not period.start.is_after(
            self.start_after
        ):
            return False
        if self.end_before is not None and not period.end.is_before(self.end_before):
            return False
        if self.end_after is not None and not period.end.is_after(self.end_after):
            return False
        if self.statuses is not None and booking.status not in self.statuses:
            return False
        if (
            self.excluded_statuses is not None
            and booking.status in self.excluded_statuses
        ):
            return False
        return True
