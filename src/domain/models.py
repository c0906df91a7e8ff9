"""
Data models for the contact submission domain.

These type-safe data structures define clear contracts between the
validator, store, composer, dispatcher and pipeline.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any


DEFAULT_SUBJECT = "No Subject"


@dataclass(frozen=True)
class ValidatedSubmission:
    """
    Contact form input that passed validation and normalization.

    Attributes:
        name: Submitter name (trimmed, non-empty)
        email: Submitter address (trimmed, lowercased, non-empty)
        subject: Trimmed subject, or DEFAULT_SUBJECT when none was given
        message: Message text (trimmed, non-empty, may contain line breaks)
    """
    name: str
    email: str
    subject: str
    message: str


@dataclass(frozen=True)
class PersistedSubmission:
    """
    Submission as durably recorded by the store.

    Attributes:
        submission_id: Identifier assigned by the store
        created_at: UTC timestamp assigned by the store at write time
        name, email, subject, message: Values from the ValidatedSubmission
    """
    submission_id: str
    created_at: datetime
    name: str
    email: str
    subject: str
    message: str

    @classmethod
    def from_validated(
        cls,
        validated: ValidatedSubmission,
        submission_id: str,
        created_at: datetime
    ) -> 'PersistedSubmission':
        return cls(
            submission_id=submission_id,
            created_at=created_at,
            name=validated.name,
            email=validated.email,
            subject=validated.subject,
            message=validated.message,
        )

    def to_item(self) -> Dict[str, Any]:
        """Convert to a DynamoDB item."""
        return {
            'submission_id': self.submission_id,
            'created_at': self.created_at.isoformat(),
            'name': self.name,
            'email': self.email,
            'subject': self.subject,
            'message': self.message,
        }


@dataclass(frozen=True)
class SenderIdentity:
    """Verified sender address and the display name shown to recipients."""
    address: str
    display_name: str


class MessageKind(str, Enum):
    OPERATOR = "operator"
    ACKNOWLEDGMENT = "acknowledgment"


@dataclass(frozen=True)
class NotificationMessage:
    """
    Composed email, ready to hand to the mail transport.

    Attributes:
        kind: Operator alert or submitter acknowledgment
        recipient: Destination address
        sender: Formatted sender ("Display Name" <address>)
        subject: Subject line
        html_body: HTML body (user fields escaped)
        text_body: Plain text alternative
        reply_to: Reply-To address (operator message only)
    """
    kind: MessageKind
    recipient: str
    sender: str
    subject: str
    html_body: str
    text_body: str
    reply_to: Optional[str] = None


@dataclass(frozen=True)
class ComposedNotifications:
    operator_message: NotificationMessage
    acknowledgment_message: NotificationMessage

    def in_dispatch_order(self) -> List[NotificationMessage]:
        """Operator alert first, then the acknowledgment."""
        return [self.operator_message, self.acknowledgment_message]


@dataclass(frozen=True)
class DispatchOutcome:
    """
    Result of handing one message to the mail transport.

    Attributes:
        kind: Which message this outcome belongs to
        recipient: Address the message was sent to
        success: Whether the transport accepted the message
        error_message: Transport error description (if dispatch failed)
    """
    kind: MessageKind
    recipient: str
    success: bool
    error_message: Optional[str] = None


class PipelineStage(str, Enum):
    """Terminal states of one pipeline run."""
    REJECTED = "rejected"
    FAILED = "failed"
    COMPLETED = "completed"


@dataclass
class SubmissionResult:
    """
    Outcome of processing one contact form submission.

    This explicit result type makes success/failure handling clear
    and keeps HTTP concerns out of the pipeline stages.

    Attributes:
        stage: Terminal state reached
        success: Outward success flag reported to the caller
        status_code: HTTP-equivalent status code
        message: User-facing message text
        submission: Persisted record (None unless persistence succeeded)
        dispatches: One outcome per attempted email
        missing_fields: Fields that failed validation (REJECTED only)
    """
    stage: PipelineStage
    success: bool
    status_code: int
    message: str
    submission: Optional[PersistedSubmission] = None
    dispatches: List[DispatchOutcome] = field(default_factory=list)
    missing_fields: List[str] = field(default_factory=list)

    @property
    def persisted(self) -> bool:
        return self.submission is not None

    @property
    def degraded(self) -> bool:
        """Persistence succeeded but at least one notification failed."""
        return self.persisted and any(not d.success for d in self.dispatches)

    def to_response_body(self) -> Dict[str, Any]:
        return {'success': self.success, 'message': self.message}

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.submission is None:
            return f"SubmissionResult(stage={self.stage.value}, success={self.success})"
        return (
            f"SubmissionResult(stage={self.stage.value}, success={self.success}, "
            f"submission_id={self.submission.submission_id}, degraded={self.degraded})"
        )
