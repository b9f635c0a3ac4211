"""Domain layer - records, fixed sample objects, and error types.

Contents:
    * :mod:`.models` - SparkPost request and response records
    * :mod:`.samples` - Builders for the demonstration template and transmission
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .errors import (
    ConfigurationError,
    HttpError,
    ParseError,
    ServiceError,
    TransportError,
    TransportTimeoutError,
)
from .models import (
    Address,
    EmailAddress,
    Envelope,
    Recipient,
    StoredTemplateRef,
    Template,
    TemplateContent,
    TemplateCreateResult,
    Transmission,
    TransmissionCreateResult,
    to_payload,
)
from .samples import build_sample_template, build_sample_transmission

__all__ = [
    # Models
    "Address",
    "EmailAddress",
    "Envelope",
    "Recipient",
    "StoredTemplateRef",
    "Template",
    "TemplateContent",
    "TemplateCreateResult",
    "Transmission",
    "TransmissionCreateResult",
    "to_payload",
    # Samples
    "build_sample_template",
    "build_sample_transmission",
    # Errors
    "ConfigurationError",
    "HttpError",
    "ParseError",
    "ServiceError",
    "TransportError",
    "TransportTimeoutError",
]
