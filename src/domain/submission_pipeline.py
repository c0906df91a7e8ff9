"""
Contact submission pipeline - core business logic.

This module handles the end-to-end processing of one contact form submission:
1. Validate and normalize the raw payload
2. Persist the submission
3. Compose the operator alert and the acknowledgment
4. Dispatch both messages (each independently)
5. Return result (SubmissionResult)

Validation and store failures short-circuit. Dispatch failures are caught
per message; the submission is never rolled back once saved.
"""

import logging
from typing import Any, Callable, List

from .composer import compose
from .errors import DispatchError, StoreError, ValidationError
from .models import (
    DispatchOutcome,
    NotificationMessage,
    PipelineStage,
    SenderIdentity,
    SubmissionResult,
)
from .validator import validate

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Your message has been sent successfully!"
VALIDATION_MESSAGE = "Please fill in all required fields (Name, Email, Message)."
FAILURE_MESSAGE = "An internal server error occurred. Please try again later."

DeliveryPolicy = Callable[[List[DispatchOutcome]], bool]


def require_all_dispatched(outcomes: List[DispatchOutcome]) -> bool:
    """
    Report success only when every notification was dispatched.

    This keeps the legacy contract: a saved submission whose notification
    failed is still reported to the caller as a server error.
    """
    return all(o.success for o in outcomes)


def persisted_is_enough(outcomes: List[DispatchOutcome]) -> bool:
    """Report success once the submission is saved, whatever the emails did."""
    return True


class SubmissionPipeline:
    """
    Runs validation, persistence and dual-email dispatch for one submission.

    Collaborators are injected so tests can substitute fakes:

    Args:
        store: Object with save(ValidatedSubmission) -> PersistedSubmission
        dispatcher: Object with send(NotificationMessage) -> None
        operator_address: Recipient of operator alerts
        sender_identity: Verified sender address and display name
        delivery_policy: Folds dispatch outcomes into the outward success flag
    """

    def __init__(
        self,
        store,
        dispatcher,
        operator_address: str,
        sender_identity: SenderIdentity,
        delivery_policy: DeliveryPolicy = require_all_dispatched
    ):
        self.store = store
        self.dispatcher = dispatcher
        self.operator_address = operator_address
        self.sender_identity = sender_identity
        self.delivery_policy = delivery_policy

    def process(self, raw: Any) -> SubmissionResult:
        """
        Process one raw contact form payload.

        Args:
            raw: Decoded JSON body

        Returns:
            SubmissionResult in state REJECTED, FAILED or COMPLETED
        """
        try:
            validated = validate(raw)
        except ValidationError as e:
            logger.info(f"Submission rejected: missing_fields={e.missing_fields}")
            return SubmissionResult(
                stage=PipelineStage.REJECTED,
                success=False,
                status_code=400,
                message=VALIDATION_MESSAGE,
                missing_fields=e.missing_fields
            )

        try:
            persisted = self.store.save(validated)
        except StoreError as e:
            logger.error(f"Submission not saved, skipping notifications: {e}")
            return SubmissionResult(
                stage=PipelineStage.FAILED,
                success=False,
                status_code=500,
                message=FAILURE_MESSAGE
            )

        notifications = compose(persisted, self.operator_address, self.sender_identity)
        outcomes = [self._dispatch(m) for m in notifications.in_dispatch_order()]

        result = SubmissionResult(
            stage=PipelineStage.COMPLETED,
            success=self.delivery_policy(outcomes),
            status_code=200,
            message=SUCCESS_MESSAGE,
            submission=persisted,
            dispatches=outcomes
        )
        if not result.success:
            result.status_code = 500
            result.message = FAILURE_MESSAGE

        if result.degraded:
            failed = [o.kind.value for o in outcomes if not o.success]
            logger.warning(
                f"Degraded success: submission {persisted.submission_id} saved "
                f"but notification(s) failed: {failed}"
            )
        else:
            logger.info(f"Submission {persisted.submission_id} processed successfully")

        return result

    def _dispatch(self, message: NotificationMessage) -> DispatchOutcome:
        """Send one message, converting DispatchError into a failed outcome."""
        try:
            self.dispatcher.send(message)
        except DispatchError as e:
            logger.error(
                f"Failed to dispatch {message.kind.value} message "
                f"(error_code={e.error_code}): {e}"
            )
            return DispatchOutcome(
                kind=message.kind,
                recipient=message.recipient,
                success=False,
                error_message=str(e)
            )

        logger.info(f"Dispatched {message.kind.value} message")
        return DispatchOutcome(kind=message.kind, recipient=message.recipient, success=True)
