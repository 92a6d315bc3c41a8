from unittest.mock import patch

import pytest
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingCriteria,
    BookingId,
    PageRequest,
)
from services.booking.infrastructure.dynamodb_booking_repository import (
    BOOKER_INDEX,
    ITEM_INDEX,
    DynamoDBBookingRepository,
    to_filter_expression,
)
from services.shared.domain import (
    DuplicateResourceException,
    ItemId,
    OptimisticLockException,
    UserId,
)


def _client_error(code: str, operation: str) -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": "error"}}, operation)


def _item(booking) -> dict:
    """DynamoDB に保存される形式"""
    return {
        "booking_id": booking.id.value,
        "item_id": booking.item_id.value,
        "booker_id": booking.booker_id.value,
        "start_date": str(booking.period.start),
        "end_date": str(booking.period.end),
        "status": booking.status.value,
    }


@pytest.fixture
def mock_table():
    with patch(
        "services.booking.infrastructure.dynamodb_booking_repository.boto3"
    ) as mock_boto3:
        yield mock_boto3.resource.return_value.Table.return_value


@pytest.fixture
def dynamodb_repository(mock_table):
    return DynamoDBBookingRepository(table_name="test-table")


class TestDynamoDBBookingRepository:
    def test_next_identity_uses_atomic_counter(self, dynamodb_repository, mock_table):
        mock_table.update_item.return_value = {"Attributes": {"next_id": 7}}

        assert dynamodb_repository.next_identity() == BookingId(value=7)
        kwargs = mock_table.update_item.call_args.kwargs
        assert kwargs["Key"] == {"PK": "COUNTER#BOOKING", "SK": "COUNTER"}
        assert kwargs["UpdateExpression"] == "ADD #next_id :one"

    def test_save_writes_index_keys(
        self, dynamodb_repository, mock_table, create_booking
    ):
        booking = create_booking(booking_id=12, item_id=3, booker_id=2)

        dynamodb_repository.save(booking)

        item = mock_table.put_item.call_args.kwargs["Item"]
        assert item["PK"] == "BOOKING#12"
        assert item["SK"] == "BOOKING"
        assert item["status"] == "WAITING"
        assert item["GSI1PK"] == "BOOKER#2"
        assert item["GSI2PK"] == "ITEM#3"
        assert item["GSI1SK"] == f"{booking.period.start}#000000000012"
        assert item["GSI2SK"] == item["GSI1SK"]

    def test_save_duplicate_raises(
        self, dynamodb_repository, mock_table, create_booking
    ):
        mock_table.put_item.side_effect = _client_error(
            "ConditionalCheckFailedException", "PutItem"
        )
        with pytest.raises(DuplicateResourceException):
            dynamodb_repository.save(create_booking())

    def test_find_by_id(self, dynamodb_repository, mock_table, create_booking):
        booking = create_booking(booking_id=5, status=BookingStatus.APPROVED)
        mock_table.get_item.return_value = {"Item": _item(booking)}

        found = dynamodb_repository.find_by_id(BookingId(value=5))

        assert found == booking
        assert found.status == BookingStatus.APPROVED
        assert found.period == booking.period

    def test_find_by_id_missing(self, dynamodb_repository, mock_table):
        mock_table.get_item.return_value = {}
        assert dynamodb_repository.find_by_id(BookingId(value=5)) is None

    def test_update_conditions_on_expected_status(
        self, dynamodb_repository, mock_table, create_booking
    ):
        booking = create_booking(status=BookingStatus.APPROVED)

        dynamodb_repository.update(booking, expected_status=BookingStatus.WAITING)

        kwargs = mock_table.update_item.call_args.kwargs
        assert kwargs["ExpressionAttributeValues"] == {":status": "APPROVED"}
        assert kwargs["ConditionExpression"] == Attr("PK").exists() & Attr(
            "status"
        ).eq("WAITING")

    def test_update_conflict_raises_optimistic_lock(
        self, dynamodb_repository, mock_table, create_booking
    ):
        mock_table.update_item.side_effect = _client_error(
            "ConditionalCheckFailedException", "UpdateItem"
        )
        with pytest.raises(OptimisticLockException):
            dynamodb_repository.update(
                create_booking(), expected_status=BookingStatus.WAITING
            )

    def test_update_other_errors_propagate(
        self, dynamodb_repository, mock_table, create_booking
    ):
        mock_table.update_item.side_effect = _client_error(
            "ProvisionedThroughputExceededException", "UpdateItem"
        )
        with pytest.raises(ClientError):
            dynamodb_repository.update(create_booking())

    def test_delete(self, dynamodb_repository, mock_table):
        dynamodb_repository.delete(BookingId(value=3))
        mock_table.delete_item.assert_called_once_with(
            Key={"PK": "BOOKING#3", "SK": "BOOKING"}
        )

    def test_find_by_booker_reads_all_pages_then_paginates(
        self, dynamodb_repository, mock_table, create_booking
    ):
        # Arrange
        newer = create_booking(booking_id=1, start=20, end=30)
        older = create_booking(booking_id=2, start=5, end=10)
        oldest = create_booking(booking_id=3, start=1, end=2)
        mock_table.query.side_effect = [
            {"Items": [_item(newer), _item(older)], "LastEvaluatedKey": {"PK": "x"}},
            {"Items": [_item(oldest)]},
        ]

        # Act
        result = dynamodb_repository.find_by_booker(
            UserId(value=2), page=PageRequest(from_index=2, size=2)
        )

        # Assert
        assert result == [oldest]
        assert mock_table.query.call_count == 2
        first_call = mock_table.query.call_args_list[0].kwargs
        assert first_call["IndexName"] == BOOKER_INDEX
        assert first_call["KeyConditionExpression"] == Key("GSI1PK").eq("BOOKER#2")
        assert first_call["ScanIndexForward"] is False
        assert "FilterExpression" not in first_call
        assert mock_table.query.call_args_list[1].kwargs["ExclusiveStartKey"] == {
            "PK": "x"
        }

    def test_find_by_items_merges_items_newest_first(
        self, dynamodb_repository, mock_table, create_booking
    ):
        first_item = create_booking(booking_id=1, item_id=1, start=5, end=10)
        second_item = create_booking(booking_id=2, item_id=2, start=20, end=30)
        mock_table.query.side_effect = [
            {"Items": [_item(first_item)]},
            {"Items": [_item(second_item)]},
        ]

        result = dynamodb_repository.find_by_items(
            [ItemId(value=1), ItemId(value=2), ItemId(value=1)],
            BookingCriteria(statuses=frozenset({BookingStatus.WAITING})),
        )

        assert result == [second_item, first_item]
        assert mock_table.query.call_count == 2
        kwargs = mock_table.query.call_args_list[0].kwargs
        assert kwargs["IndexName"] == ITEM_INDEX
        assert kwargs["FilterExpression"] == Attr("status").is_in(["WAITING"])

    def test_find_by_booker_and_item_filters_item(
        self, dynamodb_repository, mock_table, now
    ):
        mock_table.query.return_value = {"Items": []}

        dynamodb_repository.find_by_booker_and_item(
            UserId(value=2), ItemId(value=4), BookingCriteria(end_before=now)
        )

        kwargs = mock_table.query.call_args.kwargs
        assert kwargs["FilterExpression"] == Attr("item_id").eq(4) & Attr(
            "end_date"
        ).lt(str(now))


class TestToFilterExpression:
    def test_empty_criteria_has_no_filter(self):
        assert to_filter_expression(BookingCriteria()) is None

    def test_current(self, now):
        criteria = BookingCriteria(start_before=now, end_after=now)
        assert to_filter_expression(criteria) == Attr("start_date").lt(
            str(now)
        ) & Attr("end_date").gt(str(now))

    def test_excluded_statuses_are_negated(self, now):
        criteria = BookingCriteria(
            end_before=now,
            excluded_statuses=frozenset(
                {BookingStatus.WAITING, BookingStatus.REJECTED}
            ),
        )
        assert to_filter_expression(criteria) == Attr("end_date").lt(
            str(now)
        ) & ~Attr("status").is_in(["REJECTED", "WAITING"])
