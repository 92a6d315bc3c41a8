import os

import boto3

from services.booking.domain.port import UserDirectory
from services.shared.domain import UserId


class DynamoDBUserDirectory(UserDirectory):
    """ユーザーの存在確認（ユーザー: PK=USER#{id}, SK=PROFILE）"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb")
        self.table = self.dynamodb.Table(self.table_name)

    def exists(self, user_id: UserId) -> bool:
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": "PROFILE"},
            ProjectionExpression="PK",
        )
        return "Item" in response
