"""Domain exception stories: attributes and SparkPost error body parsing."""

from __future__ import annotations

import pytest

from sparkpost_sample.domain.errors import (
    ConfigurationError,
    HttpError,
    ParseError,
    ServiceError,
    TransportError,
    TransportTimeoutError,
)


def _http_error(body: str, status_code: int = 422) -> HttpError:
    return HttpError("Could not create template.", operation="template", status_code=status_code, body=body)


@pytest.mark.os_agnostic
def test_configuration_error_names_the_variable() -> None:
    err = ConfigurationError("missing", variable="SPARKPOST_SENDER_EMAIL")

    assert err.variable == "SPARKPOST_SENDER_EMAIL"
    assert str(err) == "missing"


@pytest.mark.os_agnostic
def test_configuration_error_variable_defaults_to_none() -> None:
    assert ConfigurationError("missing").variable is None


@pytest.mark.os_agnostic
def test_timeout_is_a_kind_of_transport_error() -> None:
    """Handlers for transport failures also catch timeouts."""
    err = TransportTimeoutError("timed out", method="POST", url="https://api.example.com/templates")

    assert isinstance(err, TransportError)
    assert (err.method, err.url) == ("POST", "https://api.example.com/templates")


@pytest.mark.os_agnostic
def test_http_and_parse_errors_are_service_errors() -> None:
    assert issubclass(HttpError, ServiceError)
    assert issubclass(ParseError, ServiceError)


@pytest.mark.os_agnostic
def test_service_error_keeps_status_and_body() -> None:
    err = ParseError("Could not create transmission.", operation="transmission", status_code=200, body="{")

    assert (err.operation, err.status_code, err.body) == ("transmission", 200, "{")
    assert str(err) == "Could not create transmission."


@pytest.mark.os_agnostic
def test_api_messages_lists_each_error_message() -> None:
    err = _http_error('{"errors": [{"message": "first"}, {"message": "second"}]}')

    assert err.api_messages == ["first", "second"]


@pytest.mark.os_agnostic
def test_api_messages_appends_descriptions() -> None:
    err = _http_error('{"errors": [{"message": "resource conflict", "description": "Template already exists", "code": "1602"}]}')

    assert err.api_messages == ["resource conflict: Template already exists"]


@pytest.mark.os_agnostic
def test_api_messages_skips_entries_without_a_message() -> None:
    err = _http_error('{"errors": [{"code": "1"}, "junk", {"message": "kept"}]}')

    assert err.api_messages == ["kept"]


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    "body",
    ["", "<html>Bad Gateway</html>", "[1, 2]", '{"errors": "nope"}', '{"results": {}}'],
)
def test_api_messages_is_empty_for_bodies_without_the_error_shape(body: str) -> None:
    assert _http_error(body, status_code=502).api_messages == []
