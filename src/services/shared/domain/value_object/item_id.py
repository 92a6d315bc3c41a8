from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class ItemId:
    """貸し出し対象アイテムのID"""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"ItemId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError("Item's id should be positive")

    def __str__(self) -> str:
        return str(self.value)
