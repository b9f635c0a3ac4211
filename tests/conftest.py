"""Shared pytest fixtures for CLI, use-case and transport tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import httpx
import orjson
import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from sparkpost_sample.adapters.config.settings import SparkPostSettings
    from sparkpost_sample.adapters.memory.sparkpost import SparkPostSpy
    from sparkpost_sample.composition import AppServices

TEST_API_KEY = "k_test"
TEST_SENDER = "demo@example.com"

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for the sample's own output and result.stderr for
    diagnostics.
    """
    return CliRunner()


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def sample_environment() -> dict[str, str]:
    """Provide the two required variables with valid values."""
    return {
        "SPARKPOST_API_KEY": TEST_API_KEY,
        "SPARKPOST_SENDER_EMAIL": TEST_SENDER,
    }


@pytest.fixture
def sample_settings(sample_environment: dict[str, str]) -> SparkPostSettings:
    """Provide validated settings built from ``sample_environment``."""
    from sparkpost_sample.adapters.config.settings import load_settings

    return load_settings(sample_environment)


@pytest.fixture
def transport_spy() -> SparkPostSpy:
    """Provide a fresh in-memory transport."""
    from sparkpost_sample.adapters.memory import SparkPostSpy

    return SparkPostSpy()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before and after each test."""
    from sparkpost_sample.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield
    config_mod.get_config.cache_clear()


@pytest.fixture
def managed_logging() -> Iterator[None]:
    """Remove any console handler installed during the test."""
    from sparkpost_sample.adapters.logging.setup import shutdown_logging

    shutdown_logging()
    yield
    shutdown_logging()


@dataclass
class SampleCliContext:
    """Container for CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: SparkPostSpy instance for queueing responses and asserting on requests.
    """

    factory: Callable[[], Any]
    spy: SparkPostSpy


@pytest.fixture
def sample_cli_context() -> Callable[[Mapping[str, str]], SampleCliContext]:
    """Create CLI test context with injected configuration and a transport spy.

    Returns a function that takes the configuration mapping (what the
    environment would hold) and returns the wired factory and spy.

    Example:
        def test_happy_path(cli_runner, sample_cli_context, sample_environment) -> None:
            ctx = sample_cli_context(sample_environment)
            ctx.spy.queue("templates", 200, {"results": {"id": "tmpl_1"}})
            result = cli_runner.invoke(cli, [], obj=ctx.factory)
    """
    from sparkpost_sample.adapters.memory import SparkPostSpy, init_logging_in_memory
    from sparkpost_sample.composition import AppServices, load_settings

    def _create(config_data: Mapping[str, str]) -> SampleCliContext:
        spy = SparkPostSpy()
        config = MappingProxyType(dict(config_data))

        def _fake_get_config(**_kwargs: Any) -> Mapping[str, str]:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            load_settings=load_settings,
            init_logging=init_logging_in_memory,
            open_transport=spy.open,
        )
        return SampleCliContext(factory=lambda: test_services, spy=spy)

    return _create


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests."""
    from sparkpost_sample.composition import build_production

    return build_production


@dataclass
class MockSparkPost:
    """An ``httpx.MockTransport`` that plays the SparkPost server.

    Attributes:
        requests: Every request received, in order.
        routes: Queued ``httpx.Response`` objects (or exceptions to raise) per URL path.
    """

    requests: list[httpx.Request] = field(default_factory=lambda: [])
    routes: dict[str, list[httpx.Response | Exception]] = field(default_factory=lambda: {})

    def respond(self, path: str, status_code: int, body: str | Mapping[str, Any] = "") -> None:
        content = body.encode("utf-8") if isinstance(body, str) else orjson.dumps(body)
        self.routes.setdefault(path, []).append(httpx.Response(status_code, content=content))

    def fail(self, path: str, exc: Exception) -> None:
        self.routes.setdefault(path, []).append(exc)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queued = self.routes.get(request.url.path)
        if not queued:
            return httpx.Response(404, json={"errors": [{"message": "unexpected request"}]})
        outcome = queued.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def json_body(self, index: int) -> Any:
        return orjson.loads(self.requests[index].content)


@pytest.fixture
def mock_sparkpost() -> MockSparkPost:
    """Provide a fresh mock SparkPost server."""
    return MockSparkPost()
