"""
DynamoDB persistence for contact form submissions.

The store is append-only: each save writes one new item and there is no
update or delete path. Uniqueness is not enforced, so saving the same
submission twice yields two records.
"""

import logging
import threading
import uuid
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from domain.errors import StoreError
from domain.models import PersistedSubmission, ValidatedSubmission

logger = logging.getLogger(__name__)

# Configure DynamoDB with timeouts to prevent infinite hangs
dynamodb_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,
    read_timeout=30
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def initialize_table(table_name: str, region: str):
    """
    Create a boto3 DynamoDB Table resource for the submissions table.

    Args:
        table_name: DynamoDB table name
        region: AWS region of the table

    Returns:
        boto3 Table resource
    """
    dynamodb = boto3.resource('dynamodb', region_name=region, config=dynamodb_config)
    logger.info(
        f"DynamoDB resource initialized: table={table_name}, region={region}, "
        f"connect_timeout=10s, read_timeout=30s, max_attempts=1"
    )
    return dynamodb.Table(table_name)


class DynamoDBSubmissionStore:
    """
    Writes submissions to a DynamoDB table.

    Assigns submission_id and created_at at write time. created_at is
    strictly increasing across saves made through one store instance.
    """

    def __init__(self, table, clock: Optional[Callable[[], datetime]] = None):
        self._table = table
        self._clock = clock or _utc_now
        self._lock = threading.Lock()
        self._last_created_at: Optional[datetime] = None

    def _next_created_at(self) -> datetime:
        with self._lock:
            created_at = self._clock()
            if self._last_created_at is not None and created_at <= self._last_created_at:
                created_at = self._last_created_at + timedelta(microseconds=1)
            self._last_created_at = created_at
            return created_at

    def save(self, validated: ValidatedSubmission) -> PersistedSubmission:
        """
        Persist one submission.

        Args:
            validated: Normalized submission from the validator

        Returns:
            PersistedSubmission with its assigned id and timestamp

        Raises:
            StoreError: If DynamoDB rejects the write or cannot be reached
        """
        persisted = PersistedSubmission.from_validated(
            validated,
            submission_id=str(uuid.uuid4()),
            created_at=self._next_created_at()
        )

        try:
            self._table.put_item(Item=persisted.to_item())
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))
            logger.error(
                f"Failed to save submission: submission_id={persisted.submission_id}, "
                f"error_code={error_code}, error_message={error_message}"
            )
            raise StoreError(f"Failed to save submission: {error_message}", error_code=error_code) from e
        except BotoCoreError as e:
            logger.error(f"Failed to save submission {persisted.submission_id}: {e}")
            raise StoreError(f"Failed to save submission: {e}") from e

        logger.info(
            f"Saved submission: submission_id={persisted.submission_id}, "
            f"created_at={persisted.created_at.isoformat()}"
        )
        return persisted
