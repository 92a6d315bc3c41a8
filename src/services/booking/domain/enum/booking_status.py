from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス

    WAITING から APPROVED / REJECTED へ一度だけ遷移する。
    CANCELED は読み取り側の条件では扱うが、公開操作からは遷移しない。
    """

    WAITING = "WAITING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    CANCELED = "CANCELED"
