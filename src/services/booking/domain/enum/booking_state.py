from __future__ import annotations

from enum import Enum

from services.shared.domain.exception import UnsupportedStateException


class BookingState(str, Enum):
    """予約一覧の絞り込み条件"""

    ALL = "ALL"
    CURRENT = "CURRENT"
    FUTURE = "FUTURE"
    PAST = "PAST"
    WAITING = "WAITING"
    REJECTED = "REJECTED"

    @classmethod
    def parse(cls, token: str | BookingState) -> BookingState:
        """文字列から生成する（大文字・小文字は区別しない）"""
        if isinstance(token, BookingState):
            return token
        try:
            return cls(token.strip().upper())
        except (AttributeError, ValueError):
            raise UnsupportedStateException(str(token)) from None
