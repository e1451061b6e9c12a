"""Mapping of resolution failures to HTTP status codes"""

from http import HTTPStatus

from iconfinder.exceptions import (
    EmptyTargetError,
    IconNotFoundError,
    IconResolutionError,
    InvalidTargetUrlError,
    PageFetchError,
)

ERROR_STATUS_CODES: dict[type[IconResolutionError], HTTPStatus] = {
    EmptyTargetError: HTTPStatus.BAD_REQUEST,
    InvalidTargetUrlError: HTTPStatus.BAD_REQUEST,
    PageFetchError: HTTPStatus.BAD_GATEWAY,
    IconNotFoundError: HTTPStatus.NOT_FOUND,
}

# Metric suffixes for `icons.resolve.*`, keyed like ERROR_STATUS_CODES.
ERROR_METRIC_NAMES: dict[type[IconResolutionError], str] = {
    EmptyTargetError: "invalid_input",
    InvalidTargetUrlError: "invalid_input",
    PageFetchError: "page_error",
    IconNotFoundError: "not_found",
}


def get_error_status_code(exc: IconResolutionError) -> int:
    """Return the HTTP status code for a resolution failure."""
    return ERROR_STATUS_CODES.get(type(exc), HTTPStatus.INTERNAL_SERVER_ERROR).value


def get_error_metric_name(exc: IconResolutionError) -> str:
    """Return the metric suffix recorded for a resolution failure."""
    return ERROR_METRIC_NAMES.get(type(exc), "error")
