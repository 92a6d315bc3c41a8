from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_lifecycle import (
    BookingDetails,
    BookingLifecycleService,
)
from services.booking.domain.factory import BookingFactory
from services.booking.handlers.request_models import CreateBookingRequest, caller_id
from services.booking.handlers.response_models import to_response
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
    """予約申請 Lambda Handler（POST /bookings）"""
    booker_id = caller_id(event.headers)
    request = CreateBookingRequest.model_validate_json(event.body or "{}")

    logger.info(
        "Received create booking request",
        extra={"booker_id": booker_id.value, "item_id": request.item_id},
    )

    details: BookingDetails = {
        "item_id": request.item_id,
        "start": request.start,
        "end": request.end,
    }
    booking = service.create(booker_id, details)
    return api_response(200, to_response(booking))
