from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, order=True)
class IsoDateTime:
    """日時(ISO 8601形式)

    タイムゾーンを持たない値は UTC とみなし、常に UTC で保持する。
    """

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            normalized = self.value.replace(tzinfo=timezone.utc)
        else:
            normalized = self.value.astimezone(timezone.utc)
        object.__setattr__(self, "value", normalized)

    @classmethod
    def from_string(cls, s: str) -> IsoDateTime:
        """ISO 8601 形式の文字列から生成"""
        try:
            dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError as e:
            raise ValueError(f"Invalid ISO 8601 datetime: {s}") from e
        return cls(value=dt)

    @classmethod
    def now(cls) -> IsoDateTime:
        """現在時刻"""
        return cls(value=datetime.now(timezone.utc))

    def __str__(self) -> str:
        # 文字列比較で時系列順になるよう桁数を固定する
        return self.value.isoformat(timespec="microseconds")

    def is_before(self, other: IsoDateTime) -> bool:
        """他の日時より前かどうか"""
        return self.value < other.value

    def is_after(self, other: IsoDateTime) -> bool:
        """他の日時より後かどうか"""
        return self.value > other.value
