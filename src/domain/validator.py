"""
Contact form input validation and normalization.
"""

from typing import Any

from .errors import ValidationError
from .models import ValidatedSubmission, DEFAULT_SUBJECT

REQUIRED_FIELDS = ["name", "email", "message"]


def _clean(value: Any) -> str:
    """Return the trimmed value, or '' for anything that is not a string."""
    if not isinstance(value, str):
        return ''
    return value.strip()


def validate(raw: Any) -> ValidatedSubmission:
    """
    Check required fields and normalize a raw contact form payload.

    Args:
        raw: Decoded JSON body (anything that is not a dict counts as empty)

    Returns:
        ValidatedSubmission with trimmed fields, lowercased email and
        a defaulted subject

    Raises:
        ValidationError: If name, email or message is missing, not a
            string, or blank after trimming

    Example:
        >>> validate({"name": "Ada", "email": "ADA@X.COM", "message": "Hello"})
        ValidatedSubmission(name='Ada', email='ada@x.com', subject='No Subject', message='Hello')
    """
    payload = raw if isinstance(raw, dict) else {}

    cleaned = {f: _clean(payload.get(f)) for f in REQUIRED_FIELDS}
    missing = [f for f in REQUIRED_FIELDS if not cleaned[f]]
    if missing:
        raise ValidationError(missing)

    return ValidatedSubmission(
        name=cleaned['name'],
        email=cleaned['email'].lower(),
        subject=_clean(payload.get('subject')) or DEFAULT_SUBJECT,
        message=cleaned['message'],
    )
