from functools import wraps
from typing import Any, Callable

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from services.shared.domain.exception import (
    AccessDeniedException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
    UnsupportedStateException,
)

from .http_response import api_response, error_response

logger = Logger()

# 上から順に isinstance で判定する
_ERROR_RESPONSES: list[tuple[type[DomainException], int, str]] = [
    (UnsupportedStateException, 400, "Unknown state: UNSUPPORTED_STATUS"),
    (ResourceNotFoundException, 404, "Object is not found"),
    (AccessDeniedException, 403, "No access"),
    (BusinessRuleViolationException, 400, "Bad request"),
    (DuplicateResourceException, 409, "Duplicate exception"),
    (OptimisticLockException, 409, "Conflict"),
]


def _resolve(e: DomainException) -> tuple[int, str]:
    for exc_type, status_code, title in _ERROR_RESPONSES:
        if isinstance(e, exc_type):
            return status_code, title
    return 400, "Bad request"


def _first_error_message(e: ValidationError) -> str:
    errors = e.errors()
    if not errors:
        return str(e)
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first['msg']}" if location else first["msg"]


def handle_domain_errors(
    handler: Callable[[Any, Any], dict],
) -> Callable[[Any, Any], dict]:
    """ドメイン例外を HTTP レスポンスに変換するデコレータ

    - pydantic の ValidationError -> 400
    - DomainException -> 種別に応じて 400 / 403 / 404 / 409
    - それ以外 -> 500
    """

    @wraps(handler)
    def wrapper(event: Any, context: Any) -> dict:
        try:
            return handler(event, context)
        except ValidationError as e:
            message = _first_error_message(e)
            logger.warning("Request validation failed", extra={"reason": message})
            return error_response(400, "Validation exception", message)
        except DomainException as e:
            status_code, title = _resolve(e)
            logger.warning(
                "Request rejected",
                extra={
                    "status_code": status_code,
                    "exception": type(e).__name__,
                    "reason": str(e),
                },
            )
            return error_response(status_code, title, str(e))
        except Exception:
            logger.exception("Unhandled error")
            return api_response(500, {"message": "Internal server error"})

    return wrapper
