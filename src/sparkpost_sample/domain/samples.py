"""Pure builders for the fixed objects the sample submits."""

from __future__ import annotations

from .models import Address, Recipient, StoredTemplateRef, Template, TemplateContent, Transmission

SAMPLE_TEMPLATE_NAME = "_TMP_TEMPLATE_TEST"
SAMPLE_FROM_NAME = "Testing"
SAMPLE_SUBJECT = "Template Test"
SAMPLE_HTML = "Hello!"
SAMPLE_CAMPAIGN_ID = "sample_app_trans_test"


def build_sample_template(sender: str) -> Template:
    """Return the demonstration template sent from ``sender``.

    Example:
        >>> template = build_sample_template("demo@example.com")
        >>> template.name
        '_TMP_TEMPLATE_TEST'
        >>> template.content.from_.email
        'demo@example.com'
    """
    return Template(
        name=SAMPLE_TEMPLATE_NAME,
        content=TemplateContent(
            from_=Address(email=sender, name=SAMPLE_FROM_NAME),
            subject=SAMPLE_SUBJECT,
            html=SAMPLE_HTML,
        ),
    )


def build_sample_transmission(sender: str, template_id: str) -> Transmission:
    """Return a transmission that mails the draft of ``template_id`` back to ``sender``.

    The template was created moments earlier and has never been published,
    so the reference must point at its draft revision.

    Example:
        >>> transmission = build_sample_transmission("demo@example.com", "tmpl_123")
        >>> transmission.content.use_draft_template
        True
        >>> [r.address.email for r in transmission.recipients]
        ['demo@example.com']
    """
    return Transmission(
        campaign_id=SAMPLE_CAMPAIGN_ID,
        return_path=sender,
        recipients=[Recipient(address=Address(email=sender), return_path=sender)],
        content=StoredTemplateRef(template_id=template_id, use_draft_template=True),
    )


__all__ = [
    "SAMPLE_CAMPAIGN_ID",
    "SAMPLE_FROM_NAME",
    "SAMPLE_HTML",
    "SAMPLE_SUBJECT",
    "SAMPLE_TEMPLATE_NAME",
    "build_sample_template",
    "build_sample_transmission",
]
