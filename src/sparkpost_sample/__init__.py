"""Public package surface for the SparkPost stored-template sample.

Routes imports through the architectural layers:
- Domain exports: request/response records and the fixed sample objects
- Application exports: the two request flows and the linear sample run
- Composition exports: wired adapter services
"""

from __future__ import annotations

# Application exports
from .application.use_cases import SampleOutcome, create_template, create_transmission, run_sample

# Composition exports (wired adapters)
from .composition import build_production, load_settings

# Domain exports
from .domain.models import (
    Address,
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
from .domain.samples import build_sample_template, build_sample_transmission

__all__ = [
    "Address",
    "Envelope",
    "Recipient",
    "SampleOutcome",
    "StoredTemplateRef",
    "Template",
    "TemplateContent",
    "TemplateCreateResult",
    "Transmission",
    "TransmissionCreateResult",
    "build_production",
    "build_sample_template",
    "build_sample_transmission",
    "create_template",
    "create_transmission",
    "load_settings",
    "run_sample",
    "to_payload",
]
