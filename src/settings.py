"""
Environment configuration for the contact form Lambda.
"""

import logging
import os
from dataclasses import dataclass

from domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_REGION = 'us-east-1'
DEFAULT_SENDER_NAME = 'Contact Form'

# Optional values needed before (or without) the required configuration:
# logging is set up at import and every response carries CORS headers.
ENVIRONMENT = os.environ.get('ENVIRONMENT', 'dev')
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
CORS_ALLOW_ORIGIN = os.environ.get('CORS_ALLOW_ORIGIN', '*')


@dataclass(frozen=True)
class Settings:
    contacts_table: str
    operator_email: str
    sender_email: str
    sender_name: str
    ses_region: str
    dynamodb_region: str
    environment: str


def _require(name: str) -> str:
    value = os.environ.get(name, '').strip()
    if not value:
        raise ConfigurationError(
            f"{name} environment variable is required but not set. "
            f"Please configure this in your SAM template or Lambda environment."
        )
    return value


def load_settings() -> Settings:
    """
    Read and validate configuration from environment variables.

    Returns:
        Settings: The validated configuration

    Raises:
        ConfigurationError: If a required variable is missing
    """
    region = os.environ.get('AWS_REGION', os.environ.get('AWS_DEFAULT_REGION', DEFAULT_REGION))

    settings = Settings(
        contacts_table=_require('CONTACTS_TABLE'),
        operator_email=_require('OPERATOR_EMAIL'),
        sender_email=_require('SENDER_EMAIL'),
        sender_name=os.environ.get('SENDER_NAME', '').strip() or DEFAULT_SENDER_NAME,
        ses_region=os.environ.get('SES_REGION', '').strip() or region,
        dynamodb_region=region,
        environment=ENVIRONMENT,
    )

    logger.info(
        f"Settings loaded: environment={settings.environment}, table={settings.contacts_table}, "
        f"ses_region={settings.ses_region}"
    )
    return settings
