from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.comment_eligibility import (
    CommentEligibilityChecker,
)
from services.booking.handlers.request_models import CheckCommentRequest
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import IsoDateTime, ItemId, UserId

logger = Logger()

repository = DynamoDBBookingRepository()
checker = CommentEligibilityChecker(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """コメント可否確認 Lambda Handler

    アイテムサービスから直接呼び出される。不可の場合 eligible=False を返し、
    コメントの拒否（400）は呼び出し側で行う。
    """
    payload = event.get("Payload", event)
    request = CheckCommentRequest.model_validate(payload)
    now = IsoDateTime(request.now) if request.now else IsoDateTime.now()

    logger.info(
        "Received check comment request",
        extra={"user_id": request.user_id, "item_id": request.item_id},
    )

    booking_id = checker.may_comment(
        UserId(value=request.user_id), ItemId(value=request.item_id), now
    )
    return {
        "status": "success",
        "data": {
            "eligible": booking_id is not None,
            "booking_id": booking_id.value if booking_id is not None else None,
        },
    }
