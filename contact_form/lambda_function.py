"""
Contact Form Lambda Function

Entry point for API Gateway. Configuration is read from the environment once
per execution environment; the handler and its SES/HTTP clients are reused
across invocations.

Environment variables:
    SENDER_EMAIL: SES verified sender address
    RECIPIENT_EMAIL: Address that receives the submissions
    CLOUDFLARE_SECRET_KEY: Turnstile shared secret
    ENV_TYPE: "dev" adds a [DEV] marker to the subject
    AWS_REGION: SES region (defaults to eu-west-1)
    MESSAGES_LOCALE: Response language, "pl" or "en"
    LOG_LEVEL: Logging level
"""

import logging
from typing import Any, Dict, Optional

from contact_form.config import ContactFormConfig
from contact_form.handler import ContactFormHandler

logger = logging.getLogger()

_handler: Optional[ContactFormHandler] = None


def configure_logging(level: str) -> None:
    """Apply the configured level to the root logger."""
    try:
        logger.setLevel(level)
    except ValueError:
        logger.setLevel(logging.INFO)
        logger.warning(f"Unknown LOG_LEVEL {level!r}, using INFO")


def get_handler() -> ContactFormHandler:
    """Build the handler on first use and cache it for the process."""
    global _handler

    if _handler is None:
        config = ContactFormConfig.from_env()
        configure_logging(config.log_level)
        missing = config.missing_settings()
        if missing:
            logger.error(f"Missing contact form settings: {', '.join(missing)}")
        logger.info(f"Contact form configuration: {config.describe()}")
        _handler = ContactFormHandler(config)

    return _handler


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Handle a contact form request from API Gateway.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway proxy response with CORS headers
    """
    return get_handler().handle(event).to_dict()
