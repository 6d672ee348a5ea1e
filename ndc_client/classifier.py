"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Response classification.

A single rule decides between success and failure for every operation:
only 4xx and 5xx statuses are failures. Informational and redirect
statuses that reach the client are decoded as success bodies.
"""

from typing import Any, Type, TypeVar

from pydantic import BaseModel, ValidationError

from ndc_client.exceptions import (
    ConnectorError,
    ErrorSchemaMismatchError,
    SuccessSchemaMismatchError,
)
from ndc_client.models import ErrorResponse

ResponseT = TypeVar("ResponseT", bound=BaseModel)


def is_client_error(status_code: int) -> bool:
    return 400 <= status_code <= 499


def is_server_error(status_code: int) -> bool:
    return 500 <= status_code <= 599


def is_success_status(status_code: int) -> bool:
    """True unless ``status_code`` is a client or server error."""
    return not is_client_error(status_code) and not is_server_error(status_code)


def classify_response(
    status_code: int,
    body: Any,
    response_model: Type[ResponseT],
) -> ResponseT:
    """
    Turn a status code and a decoded JSON body into the operation result.

    Args:
        status_code: HTTP status of the response
        body: JSON-decoded response body
        response_model: Model the body must match on success

    Returns:
        The decoded success response

    Raises:
        ConnectorError: If the status is 4xx/5xx and the body is an error envelope
        SuccessSchemaMismatchError: If a success body does not match ``response_model``
        ErrorSchemaMismatchError: If a failure body is not an error envelope
    """
    if is_success_status(status_code):
        try:
            return response_model.model_validate(body)
        except ValidationError as e:
            raise SuccessSchemaMismatchError(
                f"success body does not match {response_model.__name__}: {e}",
                status_code=status_code,
            ) from e

    try:
        error_response = ErrorResponse.model_validate(body)
    except ValidationError as e:
        raise ErrorSchemaMismatchError(
            f"error body for status {status_code} does not match ErrorResponse: {e}",
            status_code=status_code,
        ) from e

    raise ConnectorError(status_code=status_code, error_response=error_response)
