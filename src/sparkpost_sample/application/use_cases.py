"""The two SparkPost request flows and the linear sample that chains them.

Contents:
    * :func:`create_template` - store the demonstration template, return its id.
    * :func:`create_transmission` - send the stored template's draft to the sender.
    * :func:`run_sample` - template create, then transmission create, reporting each.

Every step is all-or-nothing: failures raise and nothing is retried. The
template created by a run is left on the server.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar

import orjson
from pydantic import BaseModel, ValidationError

from ..domain.errors import HttpError, ParseError
from ..domain.models import Envelope, TemplateCreateResult, TransmissionCreateResult
from ..domain.samples import build_sample_template, build_sample_transmission
from .ports import ApiResponse, Transport

if TYPE_CHECKING:
    from ..adapters.config.settings import SparkPostSettings

logger = logging.getLogger(__name__)

TEMPLATES_PATH = "templates"
TRANSMISSIONS_PATH = "transmissions"

TEMPLATE_FAILURE_MESSAGE = "Could not create template."
TRANSMISSION_FAILURE_MESSAGE = "Could not create transmission."

ResultT = TypeVar("ResultT", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class SampleOutcome:
    """Identifiers reported by a completed sample run."""

    template_id: str
    transmission: TransmissionCreateResult


def _parse_results(response: ApiResponse, result_type: type[ResultT], *, operation: str) -> ResultT:
    """Decode a 200 body and unwrap its ``results`` envelope.

    Raises:
        ParseError: When the body is not JSON or lacks the required fields.
    """
    try:
        payload: Any = orjson.loads(response.body)
    except orjson.JSONDecodeError as exc:
        raise ParseError(
            f"Server response to {operation} create is not valid JSON",
            operation=operation,
            status_code=response.status_code,
            body=response.body,
        ) from exc

    try:
        return Envelope[result_type].model_validate(payload).results  # type: ignore[valid-type]
    except ValidationError as exc:
        raise ParseError(
            f"Server response to {operation} create is missing required fields",
            operation=operation,
            status_code=response.status_code,
            body=response.body,
        ) from exc


def _reject(response: ApiResponse, message: str, *, operation: str) -> HttpError:
    logger.debug(
        "%s create returned status %s: %s",
        operation.capitalize(),
        response.status_code,
        response.body,
        extra={"operation": operation, "status_code": response.status_code},
    )
    return HttpError(message, operation=operation, status_code=response.status_code, body=response.body)


def create_template(settings: SparkPostSettings, transport: Transport) -> str:
    """Store the demonstration template and return its server-assigned id.

    Args:
        settings: Validated settings; ``sender_email`` becomes the template's from address.
        transport: Transport used for ``POST templates``.

    Returns:
        The non-empty template id from ``results.id``.

    Raises:
        HttpError: The server answered with a status other than 200.
        ParseError: A 200 body that is not JSON or has no usable ``results.id``.
        TransportError: The request did not complete.
    """
    template = build_sample_template(settings.sender_email)
    response = transport.call("POST", TEMPLATES_PATH, template)
    if not response.ok:
        raise _reject(response, TEMPLATE_FAILURE_MESSAGE, operation="template")

    result = _parse_results(response, TemplateCreateResult, operation="template")
    logger.info("Template created", extra={"template_id": result.id})
    return result.id


def create_transmission(
    settings: SparkPostSettings,
    transport: Transport,
    template_id: str,
) -> TransmissionCreateResult:
    """Send the draft of ``template_id`` to the configured sender address.

    Raises:
        HttpError: The server answered with a status other than 200.
        ParseError: A 200 body that is not JSON or lacks the result fields.
        TransportError: The request did not complete.
    """
    transmission = build_sample_transmission(settings.sender_email, template_id)
    response = transport.call("POST", TRANSMISSIONS_PATH, transmission)
    if not response.ok:
        raise _reject(response, TRANSMISSION_FAILURE_MESSAGE, operation="transmission")

    result = _parse_results(response, TransmissionCreateResult, operation="transmission")
    logger.info(
        "Transmission created",
        extra={
            "transmission_id": result.id,
            "total_accepted_recipients": result.total_accepted_recipients,
            "total_rejected_recipients": result.total_rejected_recipients,
        },
    )
    return result


def run_sample(
    settings: SparkPostSettings,
    transport: Transport,
    *,
    echo: Callable[[str], None],
) -> SampleOutcome:
    """Create the template, then a transmission that uses it.

    The transmission is only attempted once the template id has been parsed
    and validated. ``echo`` receives each user-facing line as soon as the
    corresponding step succeeds, so a failing transmission still leaves the
    template id on screen.

    Raises:
        HttpError, ParseError, TransportError: From whichever step failed.
    """
    template_id = create_template(settings, transport)
    echo(f"Server says template was created with ID: {template_id}")

    result = create_transmission(settings, transport, template_id)
    echo(
        f"Server says transmission was created with ID: {result.id}\n"
        f"Total rejected recipients: {result.total_rejected_recipients}\n"
        f"Total accepted recipients: {result.total_accepted_recipients}"
    )
    return SampleOutcome(template_id=template_id, transmission=result)


__all__ = [
    "TEMPLATES_PATH",
    "TEMPLATE_FAILURE_MESSAGE",
    "TRANSMISSIONS_PATH",
    "TRANSMISSION_FAILURE_MESSAGE",
    "SampleOutcome",
    "create_template",
    "create_transmission",
    "run_sample",
]
