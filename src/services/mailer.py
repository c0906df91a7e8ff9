"""
Amazon SES mail dispatch for contact form notifications.

Sends composed notifications through SES. Each message is attempted exactly
once: the client is configured without retries and there is no queue behind
it, so a failure is reported to the caller as DispatchError.
"""

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from domain.errors import DispatchError
from domain.models import NotificationMessage

logger = logging.getLogger(__name__)

CHARSET = 'UTF-8'


def initialize_ses_client(region: str):
    """
    Initialize boto3 SES client with timeout configuration.

    Returns:
        boto3.client: Configured SES client
    """
    client_config = Config(
        retries={
            'max_attempts': 1,  # 1 attempt total (no retries)
            'mode': 'standard'
        },
        connect_timeout=10,
        read_timeout=30
    )

    client = boto3.client('ses', region_name=region, config=client_config)

    logger.info(
        f"SES client initialized: region={region}, "
        f"connect_timeout=10s, read_timeout=30s, max_attempts=1"
    )
    return client


class SesMailDispatcher:
    """Hands NotificationMessages to Amazon SES."""

    def __init__(self, client):
        self._client = client

    def verify(self) -> bool:
        """
        Check once that the SES account can send.

        The outcome is only logged; request handling does not depend on it.

        Returns:
            True if SES reports sending as enabled
        """
        try:
            response = self._client.get_account_sending_enabled()
        except (ClientError, BotoCoreError) as e:
            logger.error(f"Email server connection error: {e}")
            return False

        enabled = bool(response.get('Enabled', False))
        if enabled:
            logger.info("Email server is ready to send messages")
        else:
            logger.error("Email sending is disabled for this SES account")
        return enabled

    def send(self, message: NotificationMessage) -> None:
        """
        Send one message.

        Args:
            message: Fully composed notification

        Raises:
            DispatchError: If SES rejects the message or cannot be reached
        """
        kind = message.kind.value
        request = {
            'Source': message.sender,
            'Destination': {'ToAddresses': [message.recipient]},
            'Message': {
                'Subject': {'Data': message.subject, 'Charset': CHARSET},
                'Body': {
                    'Html': {'Data': message.html_body, 'Charset': CHARSET},
                    'Text': {'Data': message.text_body, 'Charset': CHARSET},
                },
            },
        }
        if message.reply_to:
            request['ReplyToAddresses'] = [message.reply_to]

        try:
            response = self._client.send_email(**request)
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            error_message = e.response.get('Error', {}).get('Message', str(e))
            logger.error(
                f"SES rejected {kind} message: error_code={error_code}, "
                f"error_message={error_message}"
            )
            raise DispatchError(
                f"SES send failed: {error_message}",
                kind=kind,
                recipient=message.recipient,
                error_code=error_code
            ) from e
        except BotoCoreError as e:
            logger.error(f"SES unreachable while sending {kind} message: {e}")
            raise DispatchError(
                f"SES send failed: {e}",
                kind=kind,
                recipient=message.recipient
            ) from e

        logger.info(f"Sent {kind} message: ses_message_id={response.get('MessageId', '')}")
