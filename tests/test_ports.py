"""Port behavioral contract tests - verify in-memory adapter implementations.

Tests exercise in-memory adapters only - the production transport is tested
against a mock server in test_transport.py.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import orjson
import pytest

from sparkpost_sample.adapters.config.settings import SparkPostSettings
from sparkpost_sample.adapters.memory import (
    RecordedCall,
    SparkPostSpy,
    get_config_in_memory,
    init_logging_in_memory,
)
from sparkpost_sample.application.ports import ApiResponse
from sparkpost_sample.composition import build_production, build_testing
from sparkpost_sample.domain.models import StoredTemplateRef

if TYPE_CHECKING:
    from sparkpost_sample.application.ports import GetConfig, InitLogging


# ======================== In-Memory Adapter Contract Tests ========================


@pytest.fixture
def get_config_impl() -> GetConfig:
    """Provide in-memory GetConfig implementation."""
    return get_config_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    """Provide in-memory InitLogging implementation."""
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_in_memory_is_empty_and_read_only(get_config_impl: GetConfig) -> None:
    config = get_config_impl()

    assert dict(config) == {}
    with pytest.raises(TypeError):
        config["SPARKPOST_API_KEY"] = "k_test"  # type: ignore[index]


@pytest.mark.os_agnostic
def test_init_logging_in_memory_returns_none(init_logging_impl: InitLogging) -> None:
    assert init_logging_impl({"SPARKPOST_LOG_LEVEL": "DEBUG"}) is None


# ======================== SparkPostSpy ========================


@pytest.mark.os_agnostic
def test_spy_records_model_bodies_in_canonical_form(transport_spy: SparkPostSpy) -> None:
    transport_spy.call("POST", "transmissions", StoredTemplateRef(template_id="tmpl_1"))

    assert transport_spy.calls == [
        RecordedCall(method="POST", path="transmissions", body={"template_id": "tmpl_1", "use_draft_template": False})
    ]


@pytest.mark.os_agnostic
def test_spy_records_missing_bodies_as_none(transport_spy: SparkPostSpy) -> None:
    transport_spy.call("GET", "templates")

    assert transport_spy.bodies_for("templates") == [None]


@pytest.mark.os_agnostic
def test_spy_replays_queued_responses_in_order(transport_spy: SparkPostSpy) -> None:
    transport_spy.queue("templates", 200, {"results": {"id": "first"}})
    transport_spy.queue("templates", 500, "boom")

    first = transport_spy.call("POST", "templates", {})
    second = transport_spy.call("POST", "templates", {})

    assert orjson.loads(first.body) == {"results": {"id": "first"}}
    assert (second.status_code, second.body) == (500, "boom")


@pytest.mark.os_agnostic
def test_spy_answers_404_when_nothing_is_queued(transport_spy: SparkPostSpy) -> None:
    response = transport_spy.call("POST", "transmissions", {})

    assert isinstance(response, ApiResponse)
    assert response.status_code == 404
    assert not response.ok


@pytest.mark.os_agnostic
def test_spy_records_the_call_before_raising(transport_spy: SparkPostSpy) -> None:
    transport_spy.raise_exception = ConnectionError("down")

    with pytest.raises(ConnectionError):
        transport_spy.call("POST", "templates", {"name": "x"})

    assert transport_spy.paths == ["templates"]


@pytest.mark.os_agnostic
def test_spy_open_hands_out_itself(transport_spy: SparkPostSpy, sample_settings: SparkPostSettings) -> None:
    with transport_spy.open(sample_settings) as transport:
        assert transport is transport_spy

    assert transport_spy.opened_with == [sample_settings]


@pytest.mark.os_agnostic
def test_spy_clear_resets_everything(transport_spy: SparkPostSpy, sample_settings: SparkPostSettings) -> None:
    transport_spy.queue("templates", 200, "{}")
    transport_spy.call("POST", "transmissions", {})
    transport_spy.open(sample_settings)
    transport_spy.raise_exception = RuntimeError("x")

    transport_spy.clear()

    assert transport_spy.calls == []
    assert transport_spy.responses == {}
    assert transport_spy.opened_with == []
    assert transport_spy.raise_exception is None


# ======================== Composition ========================


@pytest.mark.os_agnostic
def test_build_testing_uses_the_given_spy(sample_settings: SparkPostSettings) -> None:
    spy = SparkPostSpy()
    services = build_testing(spy=spy)

    with services.open_transport(sample_settings) as transport:
        assert transport is spy


@pytest.mark.os_agnostic
def test_build_testing_reads_no_environment() -> None:
    services = build_testing()

    assert dict(services.get_config()) == {}


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    from sparkpost_sample.adapters.config.loader import get_config
    from sparkpost_sample.adapters.logging.setup import init_logging
    from sparkpost_sample.adapters.sparkpost import open_transport

    services = build_production()

    assert services.get_config is get_config
    assert services.init_logging is init_logging
    assert services.open_transport is open_transport
