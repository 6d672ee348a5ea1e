"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
NDC Client, a product of Garudex Labs

Unit tests for response classification.
"""

import pytest
from pydantic import BaseModel, ConfigDict

from ndc_client.classifier import classify_response, is_success_status
from ndc_client.exceptions import (
    BodyDecodeError,
    ConnectorError,
    ErrorSchemaMismatchError,
    SuccessSchemaMismatchError,
)
from ndc_client.models import (
    CapabilitiesResponse,
    ErrorResponse,
    ExplainResponse,
    MutationResponse,
    SchemaResponse,
)


class _AnyBody(BaseModel):
    model_config = ConfigDict(extra="allow")


ENVELOPE = {"message": "collection not found", "details": {"collection": "users"}}


class TestIsSuccessStatus:
    """Test the status code rule."""

    @pytest.mark.parametrize("status", [100, 101, 200, 201, 204, 299, 301, 304, 399])
    def test_non_error_ranges_are_success(self, status):
        assert is_success_status(status) is True

    @pytest.mark.parametrize("status", [400, 401, 404, 422, 499, 500, 502, 503, 599])
    def test_client_and_server_errors_are_failures(self, status):
        assert is_success_status(status) is False


class TestClassifyResponse:
    """Test classify_response outcomes."""

    def test_classification_is_total_over_status_range(self):
        # A body that is valid for both branches isolates the status rule
        for status in range(100, 600):
            if 400 <= status <= 599:
                with pytest.raises(ConnectorError) as exc_info:
                    classify_response(status, ENVELOPE, _AnyBody)
                assert exc_info.value.status_code == status
            else:
                assert isinstance(classify_response(status, ENVELOPE, _AnyBody), _AnyBody)

    def test_success_decodes_into_response_model(self):
        result = classify_response(
            200, {"version": "0.1.6", "capabilities": {"query": {}}}, CapabilitiesResponse
        )
        assert isinstance(result, CapabilitiesResponse)
        assert result.version == "0.1.6"

    def test_redirect_status_is_decoded_as_success(self):
        result = classify_response(302, {"details": {"plan": "seq scan"}}, ExplainResponse)
        assert result.details == {"plan": "seq scan"}

    def test_error_status_raises_connector_error_with_envelope(self):
        with pytest.raises(ConnectorError) as exc_info:
            classify_response(404, ENVELOPE, CapabilitiesResponse)

        error = exc_info.value
        assert error.status_code == 404
        assert isinstance(error.error_response, ErrorResponse)
        assert error.error_response.message == "collection not found"
        assert error.error_response.details == {"collection": "users"}
        assert "404" in str(error)

    def test_success_body_schema_mismatch(self):
        with pytest.raises(SuccessSchemaMismatchError) as exc_info:
            classify_response(200, {"unexpected": True}, CapabilitiesResponse)
        assert exc_info.value.status_code == 200

    def test_error_body_schema_mismatch_is_not_downgraded(self):
        with pytest.raises(ErrorSchemaMismatchError) as exc_info:
            classify_response(500, {"error": "no message field"}, CapabilitiesResponse)

        assert not isinstance(exc_info.value, ConnectorError)
        assert exc_info.value.status_code == 500

    def test_error_body_that_is_not_an_object(self):
        with pytest.raises(ErrorSchemaMismatchError):
            classify_response(503, "Service Unavailable", CapabilitiesResponse)

    def test_schema_mismatches_are_body_decode_errors(self):
        assert issubclass(SuccessSchemaMismatchError, BodyDecodeError)
        assert issubclass(ErrorSchemaMismatchError, BodyDecodeError)

    def test_empty_object_is_not_a_schema(self):
        with pytest.raises(SuccessSchemaMismatchError):
            classify_response(200, {}, SchemaResponse)

    def test_error_shaped_body_is_not_an_explain_response(self):
        with pytest.raises(SuccessSchemaMismatchError):
            classify_response(200, {"message": "x"}, ExplainResponse)

    def test_mutation_result_requires_affected_rows(self):
        with pytest.raises(SuccessSchemaMismatchError):
            classify_response(200, {"operation_results": [{}]}, MutationResponse)

    def test_mismatch_does_not_reclassify_status(self):
        # A 2xx with an error-shaped body is still the success branch
        with pytest.raises(SuccessSchemaMismatchError):
            classify_response(200, ENVELOPE, CapabilitiesResponse)
