import os

import boto3
from boto3.dynamodb.conditions import Key

from services.booking.domain.port import ItemCatalog
from services.booking.domain.value_object import BookableItem
from services.shared.domain import ItemId, UserId

OWNER_INDEX = "GSI1"


class DynamoDBItemCatalog(ItemCatalog):
    """アイテムの参照

    - アイテム: PK=ITEM#{id}, SK=DETAILS
    - GSI1:     所有者ごと (OWNER#{owner_id}, ITEM#{id})
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def find_by_id(self, item_id: ItemId) -> BookableItem | None:
        response = self.table.get_item(
            Key={"PK": f"ITEM#{item_id}", "SK": "DETAILS"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return BookableItem(
            id=ItemId(value=int(item["item_id"])),
            owner_id=UserId(value=int(item["owner_id"])),
            available=bool(item["available"]),
        )

    def item_ids_owned_by(self, owner_id: UserId) -> list[ItemId]:
        kwargs: dict = {
            "IndexName": OWNER_INDEX,
            "KeyConditionExpression": Key("GSI1PK").eq(f"OWNER#{owner_id}")
            & Key("GSI1SK").begins_with("ITEM#"),
            "ProjectionExpression": "item_id",
        }
        item_ids: list[ItemId] = []
        while True:
            response = self.table.query(**kwargs)
            item_ids.extend(
                ItemId(value=int(item["item_id"])) for item in response.get("Items", [])
            )
            last_evaluated_key = response.get("LastEvaluatedKey")
            if not last_evaluated_key:
                return item_ids
            kwargs["ExclusiveStartKey"] = last_evaluated_key
