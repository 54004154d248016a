"""Error Hierarchy — status codes and response bodies per error type.

Tests:
    - Client errors carry their descriptive "msg"
    - Server errors render the generic body whatever their message says
"""

from portfolio_api.core.errors import (
    GENERIC_ERROR_MESSAGE, ErrorCategory, NotFoundError, PayloadValidationError,
    PoolExhaustedError, RequestError, StoreError, internal_error_response,
)


def test_not_found_is_404_with_resource_message():
    err = NotFoundError("Project", "12")

    assert err.http_status == 404
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    body = err.to_response()
    assert body["msg"] == "Project not found"
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert err.context.resource_id == "12"


def test_payload_validation_is_400_with_details():
    details = [{"field": "body.title", "message": "Field required", "type": "missing"}]
    err = PayloadValidationError("Invalid request data", details=details)

    assert err.http_status == 400
    body = err.to_response()
    assert body["msg"] == "Invalid request data"
    assert body["error"]["details"] == details


def test_store_error_is_500_and_masked():
    err = StoreError("relation \"projects\" does not exist", "query")

    assert err.http_status == 500
    assert not err.is_client_error
    assert err.to_response() == internal_error_response()
    assert "projects" not in str(err.to_response())


def test_pool_exhausted_is_500_and_masked():
    err = PoolExhaustedError(30.0)

    assert err.http_status == 500
    assert "30s" in err.message
    assert err.to_response()["msg"] == GENERIC_ERROR_MESSAGE


def test_request_error_codes_follow_status():
    assert RequestError(404, "Not Found").code == "RESOURCE_NOT_FOUND"
    assert RequestError(405, "Method Not Allowed").category == ErrorCategory.REQUEST

    teapot = RequestError(418, "I'm a teapot")
    assert teapot.code == "HTTP_ERROR"
    assert teapot.to_response()["msg"] == "I'm a teapot"


def test_request_error_5xx_is_masked():
    body = RequestError(503, "upstream detail").to_response()

    assert body == internal_error_response()
