from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from services.shared.domain import UserId

USER_ID_HEADER = "X-Sharer-User-Id"


class CallerIdentity(BaseModel):
    """呼び出し元ユーザー（X-Sharer-User-Id ヘッダー）"""

    user_id: int = Field(..., gt=0, description="呼び出し元のユーザーID")


class BookingPathParameters(BaseModel):
    """/bookings/{booking_id} のパスパラメータ"""

    booking_id: int = Field(..., gt=0, description="予約ID")


class CreateBookingRequest(BaseModel):
    """予約申請リクエストスキーマ"""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "start": "2025-01-01T10:00:00",
                    "end": "2025-01-02T10:00:00",
                    "itemId": 1,
                }
            ]
        },
    )

    start: datetime = Field(
        ...,
        description="貸し出し開始日時（ISO 8601形式）",
        examples=["2025-01-01T10:00:00"],
    )
    end: datetime = Field(
        ...,
        description="貸し出し終了日時（ISO 8601形式）",
        examples=["2025-01-02T10:00:00"],
    )
    item_id: int = Field(..., gt=0, alias="itemId", description="アイテムID")


class UpdateStatusQuery(BaseModel):
    """PATCH /bookings/{booking_id}?approved= のクエリ"""

    # 省略時も validator を通す
    approved: bool = Field(default=None, validate_default=True)

    @field_validator("approved", mode="before")
    @classmethod
    def require_true_or_false(cls, v):
        if isinstance(v, bool):
            return v
        if isinstance(v, str) and v.lower() in ("true", "false"):
            return v.lower() == "true"
        raise ValueError("Parameter approved should be true or false")


class ListBookingsQuery(BaseModel):
    """予約一覧のクエリ"""

    model_config = ConfigDict(populate_by_name=True)

    state: str = Field(default="ALL", description="絞り込み条件")
    from_index: int = Field(
        default=0,
        ge=0,
        alias="from",
        description="取得開始位置（0始まり）",
    )
    size: int = Field(default=10, gt=0, description="1ページの件数")


class ProjectItemsRequest(BaseModel):
    """アイテムの前回 / 次回予約の取得リクエスト（アイテムサービスから呼び出し）"""

    item_ids: list[int] = Field(..., min_length=1)
    now: datetime | None = Field(default=None, description="基準時刻（省略時は現在）")


class CheckCommentRequest(BaseModel):
    """コメント可否の確認リクエスト（アイテムサービスから呼び出し）"""

    user_id: int = Field(..., gt=0)
    item_id: int = Field(..., gt=0)
    now: datetime | None = None


def caller_id(headers: dict[str, str] | None) -> UserId:
    """リクエストヘッダーから呼び出し元ユーザーIDを取り出す"""
    normalized = {k.lower(): v for k, v in (headers or {}).items()}
    identity = CallerIdentity.model_validate(
        {"user_id": normalized.get(USER_ID_HEADER.lower())}
    )
    return UserId(value=identity.user_id)
