"""
AWS-facing services for Lambda handlers.

This package contains the DynamoDB submission store, the SES mail
dispatcher and the email body template loader.
"""

__all__ = ['mailer', 'store', 'templates']
