from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.item_booking_projector import ItemBookingProjector
from services.booking.handlers.request_models import ProjectItemsRequest
from services.booking.handlers.response_models import to_item_bookings_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.shared.domain import IsoDateTime, ItemId

logger = Logger()

repository = DynamoDBBookingRepository()
projector = ItemBookingProjector(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """アイテムの前回 / 次回予約 Lambda Handler

    アイテムサービスから直接呼び出される。
    """
    payload = event.get("Payload", event)
    request = ProjectItemsRequest.model_validate(payload)
    now = IsoDateTime(request.now) if request.now else IsoDateTime.now()

    logger.info(
        "Received project item bookings request",
        extra={"item_count": len(request.item_ids)},
    )

    item_ids = [ItemId(value=item_id) for item_id in request.item_ids]
    projections = projector.resolve_batch(item_ids, now)
    return {
        "status": "success",
        "data": [
            to_item_bookings_response(item_id.value, projections[item_id])
            for item_id in item_ids
        ],
    }
