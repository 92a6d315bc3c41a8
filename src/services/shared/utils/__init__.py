from .error_handler import handle_domain_errors
from .http_response import api_response, error_response
from .logger import get_logger

__all__ = ["api_response", "error_response", "get_logger", "handle_domain_errors"]
