"""REST clients for the public gateway."""

from intcenter.clients.rest import (
    RestClient,
    calculate_retry_delay,
    classify_response,
    parse_error_response,
)
from intcenter.clients.services import ServicesRestClient

__all__ = [
    "RestClient",
    "ServicesRestClient",
    "calculate_retry_delay",
    "classify_response",
    "parse_error_response",
]
