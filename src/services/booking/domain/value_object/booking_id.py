from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class BookingId:
    """予約ID

    永続化層の採番で決まり、以後変更されない。
    """

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"BookingId must be an integer: {self.value!r}")
        if self.value <= 0:
            raise ValueError("Booking's id should be positive")

    def __str__(self) -> str:
        return str(self.value)
