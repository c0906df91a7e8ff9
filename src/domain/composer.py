"""
Notification composition for accepted submissions.

Builds the operator alert and the submitter acknowledgment from a persisted
submission. Composition is pure: the output depends only on the arguments
(and the packaged templates), never on the clock or the transport.
"""

import logging
from email.utils import formataddr

from .models import (
    ComposedNotifications,
    MessageKind,
    NotificationMessage,
    PersistedSubmission,
    SenderIdentity,
)
from services import templates as template_service

logger = logging.getLogger(__name__)

OPERATOR_SUBJECT_PREFIX = "New Contact Form Message: "
ACKNOWLEDGMENT_SUBJECT = "Thank you for your message!"


def _display_name(value: str) -> str:
    # Header values must stay on one line
    return ' '.join(value.split())


def _single_line(value: str) -> str:
    """Replace line breaks only; other whitespace is kept as typed."""
    return ' '.join(value.splitlines())


def compose_operator_message(
    persisted: PersistedSubmission,
    operator_address: str,
    sender_identity: SenderIdentity
) -> NotificationMessage:
    """
    Build the alert sent to the site operator.

    The sender shows the submitter's name at our verified address, and
    Reply-To points at the submitter so the operator can answer directly.
    """
    html_body = template_service.render_template(
        template_service.load_template("operator_alert.html"),
        name=template_service.escape_markup(persisted.name),
        email=template_service.escape_markup(persisted.email),
        subject=template_service.escape_markup(persisted.subject),
        message=template_service.escape_markup(persisted.message),
    )
    text_body = template_service.render_template(
        template_service.load_template("operator_alert.txt"),
        name=persisted.name,
        email=persisted.email,
        subject=persisted.subject,
        message=persisted.message,
    )

    return NotificationMessage(
        kind=MessageKind.OPERATOR,
        recipient=operator_address,
        sender=formataddr((_display_name(persisted.name), sender_identity.address)),
        subject=OPERATOR_SUBJECT_PREFIX + _single_line(persisted.subject),
        html_body=html_body,
        text_body=text_body,
        reply_to=persisted.email,
    )


def compose_acknowledgment_message(
    persisted: PersistedSubmission,
    sender_identity: SenderIdentity
) -> NotificationMessage:
    """Build the auto-reply sent to the submitter."""
    html_body = template_service.render_template(
        template_service.load_template("acknowledgment.html"),
        name=template_service.escape_markup(persisted.name),
        signature=template_service.escape_markup(sender_identity.display_name),
    )
    text_body = template_service.render_template(
        template_service.load_template("acknowledgment.txt"),
        name=persisted.name,
        signature=sender_identity.display_name,
    )

    return NotificationMessage(
        kind=MessageKind.ACKNOWLEDGMENT,
        recipient=persisted.email,
        sender=formataddr((_display_name(sender_identity.display_name), sender_identity.address)),
        subject=ACKNOWLEDGMENT_SUBJECT,
        html_body=html_body,
        text_body=text_body,
    )


def compose(
    persisted: PersistedSubmission,
    operator_address: str,
    sender_identity: SenderIdentity
) -> ComposedNotifications:
    """
    Build both notifications for a persisted submission.

    Args:
        persisted: Submission as recorded by the store
        operator_address: Where operator alerts are delivered
        sender_identity: Verified sender address and display name

    Returns:
        ComposedNotifications with the operator alert and acknowledgment
    """
    logger.info(f"Composing notifications for submission {persisted.submission_id}")
    return ComposedNotifications(
        operator_message=compose_operator_message(persisted, operator_address, sender_identity),
        acknowledgment_message=compose_acknowledgment_message(persisted, sender_identity),
    )
