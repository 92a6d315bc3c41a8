import os
from functools import reduce
from operator import and_
from typing import Iterable

import boto3
from boto3.dynamodb.conditions import Attr, ConditionBase, Key
from botocore.exceptions import ClientError

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository, newest_first
from services.booking.domain.value_object import (
    BookingCriteria,
    BookingId,
    BookingPeriod,
    PageRequest,
)
from services.shared.domain import IsoDateTime, ItemId, UserId
from services.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    OptimisticLockException,
)

BOOKER_INDEX = "GSI1"
ITEM_INDEX = "GSI2"

_COUNTER_KEY = {"PK": "COUNTER#BOOKING", "SK": "COUNTER"}


def _sort_key(booking: Booking) -> str:
    # 開始日時 + ゼロ埋めID で GSI 上の並びを安定させる
    return f"{booking.period.start}#{booking.id.value:012d}"


def to_filter_expression(criteria: BookingCriteria) -> ConditionBase | None:
    """BookingCriteria を DynamoDB の FilterExpression に変換する"""
    conditions: list[ConditionBase] = []
    if criteria.start_before is not None:
        conditions.append(Attr("start_date").lt(str(criteria.start_before)))
    if criteria.start_after is not None:
        conditions.append(Attr("start_date").gt(str(criteria.start_after)))
    if criteria.end_before is not None:
        conditions.append(Attr("end_date").lt(str(criteria.end_before)))
    if criteria.end_after is not None:
        conditions.append(Attr("end_date").gt(str(criteria.end_after)))
    if criteria.statuses:
        conditions.append(
            Attr("status").is_in(sorted(s.value for s in criteria.statuses))
        )
    if criteria.excluded_statuses:
        conditions.append(
            ~Attr("status").is_in(sorted(s.value for s in criteria.excluded_statuses))
        )
    if not conditions:
        return None
    return reduce(and_, conditions)


class DynamoDBBookingRepository(BookingRepository):
    """DynamoDBを使用したBookingRepository の具象実装

    - 予約:   PK=BOOKING#{id}, SK=BOOKING
    - GSI1:   予約者ごと (BOOKER#{booker_id}, {start}#{id})
    - GSI2:   アイテムごと (ITEM#{item_id}, {start}#{id})
    - 採番:   COUNTER#BOOKING のアトミックカウンタ
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def next_identity(self) -> BookingId:
        """アトミックカウンタで予約IDを採番する"""
        response = self.table.update_item(
            Key=_COUNTER_KEY,
            UpdateExpression="ADD #next_id :one",
            ExpressionAttributeNames={"#next_id": "next_id"},
            ExpressionAttributeValues={":one": 1},
            ReturnValues="UPDATED_NEW",
        )
        return BookingId(value=int(response["Attributes"]["next_id"]))

    def save(self, booking: Booking) -> None:
        """予約をDBに保存する"""
        item = {
            "PK": f"BOOKING#{booking.id}",
            "SK": "BOOKING",
            "entity_type": "BOOKING",
            "booking_id": booking.id.value,
            "start_date": str(booking.period.start),
            "end_date": str(booking.period.end),
            "item_id": booking.item_id.value,
            "booker_id": booking.booker_id.value,
            "status": booking.status.value,
            "GSI1PK": f"BOOKER#{booking.booker_id}",
            "GSI1SK": _sort_key(booking),
            "GSI2PK": f"ITEM#{booking.item_id}",
            "GSI2SK": _sort_key(booking),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Booking already exists: {booking.id}"
                ) from e
            raise

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        condition = Attr("PK").exists()
        if expected_status is not None:
            condition = condition & Attr("status").eq(expected_status.value)

        try:
            self.table.update_item(
                Key={"PK": f"BOOKING#{booking.id}", "SK": "BOOKING"},
                UpdateExpression="SET #status = :status",
                ExpressionAttributeNames={"#status": "status"},
                ExpressionAttributeValues={":status": booking.status.value},
                ConditionExpression=condition,
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Booking status conflict: "
                    f"expected {expected_status}, "
                    f"booking_id={booking.id}"
                ) from e
            raise

    def delete(self, booking_id: BookingId) -> None:
        self.table.delete_item(Key={"PK": f"BOOKING#{booking_id}", "SK": "BOOKING"})

    def find_by_booker(
        self,
        booker_id: UserId,
        criteria: BookingCriteria | None = None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        bookings = self._query(
            BOOKER_INDEX,
            Key("GSI1PK").eq(f"BOOKER#{booker_id}"),
            to_filter_expression(criteria or BookingCriteria()),
        )
        return self._paginate(bookings, page)

    def find_by_items(
        self,
        item_ids: Iterable[ItemId],
        criteria: BookingCriteria | None = None,
        page: PageRequest | None = None,
    ) -> list[Booking]:
        filter_expression = to_filter_expression(criteria or BookingCriteria())
        bookings: list[Booking] = []
        for item_id in dict.fromkeys(item_ids):
            bookings.extend(
                self._query(
                    ITEM_INDEX,
                    Key("GSI2PK").eq(f"ITEM#{item_id}"),
                    filter_expression,
                )
            )
        return self._paginate(bookings, page)

    def find_by_booker_and_item(
        self,
        booker_id: UserId,
        item_id: ItemId,
        criteria: BookingCriteria | None = None,
    ) -> list[Booking]:
        item_condition = Attr("item_id").eq(item_id.value)
        filter_expression = to_filter_expression(criteria or BookingCriteria())
        bookings = self._query(
            BOOKER_INDEX,
            Key("GSI1PK").eq(f"BOOKER#{booker_id}"),
            item_condition
            if filter_expression is None
            else item_condition & filter_expression,
        )
        return newest_first(bookings)

    def _query(
        self,
        index_name: str,
        key_condition: ConditionBase,
        filter_expression: ConditionBase | None,
    ) -> list[Booking]:
        """GSI を開始日時の降順で全ページ読み出す"""
        kwargs: dict = {
            "IndexName": index_name,
            "KeyConditionExpression": key_condition,
            "ScanIndexForward": False,
        }
        if filter_expression is not None:
            kwargs["FilterExpression"] = filter_expression

        bookings: list[Booking] = []
        while True:
            response = self.table.query(**kwargs)
            bookings.extend(self._to_entity(item) for item in response.get("Items", []))
            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return bookings
            kwargs["ExclusiveStartKey"] = last_evaluated_key

    def _paginate(
        self, bookings: list[Booking], page: PageRequest | None
    ) -> list[Booking]:
        # FilterExpression は Limit の後に評価されるため、ページングは読み出し後に行う
        ordered = newest_first(bookings)
        if page is None:
            return ordered
        return page.apply(ordered)

    def _to_entity(self, item: dict) -> Booking:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Booking(
            id=BookingId(value=int(item["booking_id"])),
            item_id=ItemId(value=int(item["item_id"])),
            booker_id=UserId(value=int(item["booker_id"])),
            period=BookingPeriod(
                start=IsoDateTime.from_string(item["start_date"]),
                end=IsoDateTime.from_string(item["end_date"]),
            ),
            status=BookingStatus(item["status"]),
        )
