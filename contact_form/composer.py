"""
Outbound email composition.

Every user-supplied value that ends up in the HTML body or the subject line
goes through escape_html first. The plain-text body and the Reply-To header
carry the raw values.
"""

from dataclasses import dataclass
from typing import List

from contact_form.config import ContactFormConfig
from contact_form.models import SubmissionRequest

DEV_PREFIX = "[DEV] "

HTML_ESCAPES = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
})


def escape_html(text: str) -> str:
    """
    Escape the five HTML-significant characters.

    Args:
        text: Untrusted text, may be None or empty

    Returns:
        Escaped text, empty string for falsy input
    """
    if not text:
        return ""
    return str(text).translate(HTML_ESCAPES)


@dataclass(frozen=True)
class OutboundEmail:
    """Structured send request handed to the email sender."""
    source: str
    to_addresses: List[str]
    reply_to_addresses: List[str]
    subject: str
    html_body: str
    text_body: str


def build_subject(submission: SubmissionRequest, config: ContactFormConfig) -> str:
    prefix = DEV_PREFIX if config.is_dev else ""
    topic = escape_html(submission.subject or submission.name)
    return f"{prefix}{config.subject_label} {topic}"


def build_html_body(submission: SubmissionRequest) -> str:
    message = escape_html(submission.message).replace("\n", "<br>")
    return (
        "<h2>Wiadomość</h2>"
        f"<p>Od: {escape_html(submission.name)} ({escape_html(submission.email)})</p>"
        "<hr>"
        f"<p>{message}</p>"
    )


def compose_email(submission: SubmissionRequest, config: ContactFormConfig) -> OutboundEmail:
    """
    Turn a validated submission into an outbound email.

    Args:
        submission: Validated form submission
        config: Sender/recipient addresses and subject settings

    Returns:
        Email ready for the sender
    """
    return OutboundEmail(
        source=config.sender_email,
        to_addresses=[config.recipient_email],
        reply_to_addresses=[submission.email],
        subject=build_subject(submission, config),
        html_body=build_html_body(submission),
        text_body=submission.message,
    )
