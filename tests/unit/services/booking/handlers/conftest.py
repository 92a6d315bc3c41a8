import json
import os
from dataclasses import dataclass

import pytest

# Handler モジュールは import 時に DynamoDB リソースを生成する
os.environ.setdefault("TABLE_NAME", "test-table")
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "booking-service")

from services.booking.applications import (  # noqa: E402
    BookingLifecycleService,
    CommentEligibilityChecker,
    ItemBookingProjector,
    ListBookingsService,
)
from services.booking.domain.factory import BookingFactory  # noqa: E402


@dataclass
class LambdaContext:
    function_name: str = "test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:ap-northeast-1:123456789012:function:test"
    aws_request_id: str = "da658bd3-2d6f-4e7b-8ec2-937234644fdc"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def api_event():
    """API Gateway (REST) のプロキシイベントを生成する"""

    def _event(
        user_id: int | str | None = 2,
        path_parameters: dict | None = None,
        query: dict | None = None,
        body: dict | None = None,
    ) -> dict:
        headers = {"Content-Type": "application/json"}
        if user_id is not None:
            headers["X-Sharer-User-Id"] = str(user_id)
        return {
            "resource": "/bookings",
            "path": "/bookings",
            "httpMethod": "GET",
            "headers": headers,
            "multiValueHeaders": {},
            "queryStringParameters": query,
            "multiValueQueryStringParameters": None,
            "pathParameters": path_parameters,
            "stageVariables": None,
            "requestContext": {"requestId": "test-request", "stage": "prod"},
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _event


@pytest.fixture
def lifecycle_service(repository, users, items):
    return BookingLifecycleService(
        repository=repository,
        factory=BookingFactory(),
        users=users,
        items=items,
    )


@pytest.fixture
def list_service(repository, users, items):
    return ListBookingsService(repository=repository, users=users, items=items)


@pytest.fixture
def projector(repository):
    return ItemBookingProjector(repository=repository)


@pytest.fixture
def checker(repository):
    return CommentEligibilityChecker(repository=repository)
