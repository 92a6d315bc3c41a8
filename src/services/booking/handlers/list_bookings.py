from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEvent,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.list_bookings import ListBookingsService
from services.booking.domain.enum import BookerRole
from services.booking.domain.value_object import PageRequest
from services.booking.handlers.request_models import ListBookingsQuery, caller_id
from services.booking.handlers.response_models import to_list_response
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.dynamodb_item_catalog import DynamoDBItemCatalog
from services.booking.infrastructure.dynamodb_user_directory import (
    DynamoDBUserDirectory,
)
from services.shared.domain import IsoDateTime
from services.shared.utils import api_response, handle_domain_errors

logger = Logger()

repository = DynamoDBBookingRepository()
service = ListBookingsService(
    repository=repository,
    users=DynamoDBUserDirectory(),
    items=DynamoDBItemCatalog(),
)


def _list(event: APIGatewayProxyEvent, role: BookerRole) -> dict:
    subject_id = caller_id(event.headers)
    query = ListBookingsQuery.model_validate(event.query_string_parameters or {})

    bookings = service.list(
        subject_id=subject_id,
        role=role,
        state=query.state,
        now=IsoDateTime.now(),
        page=PageRequest(from_index=query.from_index, size=query.size),
    )
    return api_response(200, to_list_response(bookings))


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_domain_errors
def booker_lambda_handler(
    event: APIGatewayProxyEvent, context: LambdaContext
) -> dict:
    """予約者としての予約一覧 Lambda Handler（GET /bookings）"""
    return _list(event, BookerRole.BOOKER)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEvent)
@handle_domain_errors
def owner_lambda_handler(
    event: APIGatewayProxyEvent, context: LambdaContext
) -> dict:
    """所有アイテムへの予約一覧 Lambda Handler（GET /bookings/owner）"""
    return _list(event, BookerRole.OWNER)
