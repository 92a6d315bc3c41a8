from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class UserId:
    """ユーザーID（全サービス共通）"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"UserId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError("User's id should be positive")

    def __str__(self) -> str:
        return str(self.value)
