"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
from datetime import datetime, timezone

import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('CONTACTS_TABLE', 'contact-submissions-test')
os.environ.setdefault('OPERATOR_EMAIL', 'owner@example.com')
os.environ.setdefault('SENDER_EMAIL', 'noreply@example.com')
os.environ.setdefault('SENDER_NAME', 'Site Owner')
os.environ.setdefault('AWS_DEFAULT_REGION', 'us-west-2')
os.environ.setdefault('ENVIRONMENT', 'test')
os.environ.setdefault('LOG_LEVEL', 'INFO')

from domain.models import PersistedSubmission, SenderIdentity  # noqa: E402


@pytest.fixture
def sender_identity():
    return SenderIdentity(address='noreply@example.com', display_name='Site Owner')


@pytest.fixture
def persisted_submission():
    """Persisted submission with a multi-line message."""
    return PersistedSubmission(
        submission_id='sub-123',
        created_at=datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc),
        name='Ada Lovelace',
        email='ada@example.com',
        subject='Analytical Engine',
        message='Hello there.\nSecond line.'
    )
