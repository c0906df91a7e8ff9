"""
Tests for environment configuration.
"""

import pytest
from unittest.mock import patch
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.errors import ConfigurationError
import settings as settings_module
from settings import load_settings

BASE_ENV = {
    'CONTACTS_TABLE': 'contacts',
    'OPERATOR_EMAIL': 'owner@example.com',
    'SENDER_EMAIL': 'noreply@example.com',
    'AWS_REGION': 'eu-central-1',
}


class TestLoadSettings:
    """Test reading settings from the environment."""

    @patch.dict(os.environ, BASE_ENV, clear=True)
    def test_defaults(self):
        """Test optional values fall back to defaults."""
        settings = load_settings()

        assert settings.contacts_table == 'contacts'
        assert settings.operator_email == 'owner@example.com'
        assert settings.sender_email == 'noreply@example.com'
        assert settings.sender_name == 'Contact Form'
        assert settings.ses_region == 'eu-central-1'
        assert settings.dynamodb_region == 'eu-central-1'
        assert settings.environment == settings_module.ENVIRONMENT

    @patch.dict(os.environ, dict(BASE_ENV, SES_REGION='us-east-1', SENDER_NAME='Site Owner'), clear=True)
    def test_overrides(self):
        """Test SES region and sender name overrides."""
        settings = load_settings()

        assert settings.ses_region == 'us-east-1'
        assert settings.dynamodb_region == 'eu-central-1'
        assert settings.sender_name == 'Site Owner'

    @pytest.mark.parametrize("missing", ['CONTACTS_TABLE', 'OPERATOR_EMAIL', 'SENDER_EMAIL'])
    def test_missing_required(self, missing):
        """Test missing required variable names the variable."""
        env = {k: v for k, v in BASE_ENV.items() if k != missing}
        with patch.dict(os.environ, env, clear=True):
            with pytest.raises(ConfigurationError, match=missing):
                load_settings()

    @patch.dict(os.environ, dict(BASE_ENV, OPERATOR_EMAIL='   '), clear=True)
    def test_blank_required(self):
        """Test whitespace-only value counts as missing."""
        with pytest.raises(ConfigurationError, match='OPERATOR_EMAIL'):
            load_settings()


class TestProcessWideSettings:
    """Test values read once at import, before required config is loaded."""

    def test_values_follow_environment(self):
        """Test module-level values mirror the test environment."""
        assert settings_module.ENVIRONMENT == os.environ.get('ENVIRONMENT', 'dev')
        assert settings_module.LOG_LEVEL == os.environ.get('LOG_LEVEL', 'INFO')
        assert settings_module.CORS_ALLOW_ORIGIN == os.environ.get('CORS_ALLOW_ORIGIN', '*')

    def test_handler_uses_settings_values(self):
        """Test the handler takes its process-wide values from settings."""
        import contact_handler

        assert contact_handler.ENVIRONMENT is settings_module.ENVIRONMENT
        assert contact_handler.LOG_LEVEL is settings_module.LOG_LEVEL
        assert contact_handler.CORS_ALLOW_ORIGIN is settings_module.CORS_ALLOW_ORIGIN


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
