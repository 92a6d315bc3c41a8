from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_lifecycle import BookingLifecycleService
from services.booking.domain.factory import BookingFactory
from services.booking.domain.value_object import BookingId
from services.booking.handlers.request_models import BookingPathParameters, caller_id
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.dynamodb_item_catalog import DynamoDBItemCatalog
from services.booking.infrastructure.dynamodb_user_directory import (
    DynamoDBUserDirectory,
)
from services.shared.utils import api_response, handle_domain_errors

logger = Logger()

repository = DynamoDBBookingRepository()
service = BookingLifecycleService(
    repository=repository,
    factory=BookingFactory(),
    users=DynamoDBUserDirectory(),
    items=DynamoDBItemCatalog(),
)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_domain_errors
def lambda_handler(event: APIGatewayProxyEvent, context: LambdaContext) -> dict:
    """予約削除 Lambda Handler（DELETE /bookings/{booking_id}）"""
    user_id = caller_id(event.headers)
    path = BookingPathParameters.model_validate(event.path_parameters or {})

    logger.info(
        "Received delete booking request",
        extra={"user_id": user_id.value, "booking_id": path.booking_id},
    )

    booking_id = service.delete(user_id, BookingId(value=path.booking_id))
    return api_response(200, booking_id.value)
