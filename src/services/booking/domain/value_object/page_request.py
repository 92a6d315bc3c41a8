from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """オフセット型のページ指定

    from_index を含むブロック（size 件単位、0 始まり）を返す。
    例: from_index=5, size=2 -> 3 ブロック目 = 4, 5 件目
    """

    from_index: int = 0
    size: int = 10

    def __post_init__(self) -> None:
        if self.from_index < 0:
            raise ValueError("Parameter 'from' should be positive or zero")
        if self.size <= 0:
            raise ValueError("Parameter 'size' should be positive")

    @property
    def page_number(self) -> int:
        return self.from_index // self.size

    @property
    def offset(self) -> int:
        return self.page_number * self.size

    def apply(self, items: Sequence[T]) -> list[T]:
        """並び替え済みのシーケンスから該当ページを切り出す"""
        return list(items[self.offset : self.offset + self.size])
