"""
Email body template utilities.

This module loads notification body templates from the email_templates/ directory
packaged with the Lambda and renders them with string.Template placeholders
($name). Loaded templates are cached in memory for warm Lambda invocations.
"""

import html
import logging
from pathlib import Path
from string import Template
from typing import Dict

logger = logging.getLogger(__name__)

# Module-level cache: {template_name: template_content}
_template_cache: Dict[str, str] = {}

# src/services/templates.py -> src/services/email_templates/
# In Lambda: /var/task/services/email_templates/
TEMPLATES_DIR = Path(__file__).parent / 'email_templates'


def _load_from_filesystem(template_name: str) -> str:
    """
    Load template from local filesystem.

    Raises:
        FileNotFoundError: If template file doesn't exist
    """
    template_path = TEMPLATES_DIR / template_name
    logger.info(f"Loading template from filesystem: {template_path}")

    with open(template_path, 'r', encoding='utf-8') as f:
        content = f.read()

    logger.info(f"Loaded template from filesystem: {len(content)} characters")
    return content


def load_template(template_name: str, use_cache: bool = True) -> str:
    """
    Load a body template, using the in-memory cache when available.

    Args:
        template_name: Template file name (e.g., "operator_alert.html")
        use_cache: Use cached version if available (default: True)

    Returns:
        str: Template content

    Raises:
        ValueError: If template not found
    """
    if use_cache and template_name in _template_cache:
        return _template_cache[template_name]

    try:
        content = _load_from_filesystem(template_name)
    except FileNotFoundError:
        logger.error(
            f"Template not found: {template_name}. "
            f"Expected location: {TEMPLATES_DIR / template_name}"
        )
        raise ValueError(f"Template '{template_name}' not found")

    _template_cache[template_name] = content
    return content


def escape_markup(value: str) -> str:
    """
    HTML-escape user-supplied text and convert line breaks to <br>.

    Example:
        >>> escape_markup("<b>hi</b>\\nthere")
        '&lt;b&gt;hi&lt;/b&gt;<br>there'
    """
    escaped = html.escape(value, quote=True)
    return escaped.replace('\r\n', '\n').replace('\n', '<br>')


def render_template(template: str, **variables) -> str:
    """
    Substitute $placeholders in a template.

    Values are inserted verbatim; callers escape user-controlled values
    for HTML templates before passing them in.

    Raises:
        ValueError: If a placeholder in the template has no value
    """
    try:
        return Template(template).substitute(**variables)
    except KeyError as e:
        missing_var = str(e).strip("'")
        logger.error(f"Missing variable in template: {missing_var}")
        raise ValueError(f"Missing required variable in template: {missing_var}")


def clear_cache() -> None:
    """Clear the template cache."""
    _template_cache.clear()
    logger.info("Template cache cleared")
