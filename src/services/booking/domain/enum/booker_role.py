from enum import Enum


class BookerRole(str, Enum):
    """一覧取得時の利用者の立場"""

    BOOKER = "BOOKER"
    OWNER = "OWNER"
