"""
Configuration for the contact form Lambda function.

Values come from the Lambda environment and are read once per process,
then passed into the handler explicitly.
"""

import os
from dataclasses import dataclass, fields
from typing import List, Mapping, Optional

DEFAULT_REGION = "eu-west-1"
DEFAULT_SUBJECT_LABEL = "[Kontakt]"
DEFAULT_LOCALE = "pl"
DEV_ENVIRONMENT = "dev"

REQUIRED_SETTINGS = ["sender_email", "recipient_email", "captcha_secret"]


@dataclass(frozen=True)
class ContactFormConfig:
    """Settings injected into ContactFormHandler."""
    sender_email: str
    recipient_email: str
    captcha_secret: str
    region: str = DEFAULT_REGION
    environment: str = "prod"
    subject_label: str = DEFAULT_SUBJECT_LABEL
    locale: str = DEFAULT_LOCALE
    log_level: str = "INFO"

    @property
    def is_dev(self) -> bool:
        return self.environment == DEV_ENVIRONMENT

    def missing_settings(self) -> List[str]:
        """
        List required settings that are empty.

        Returns:
            Field names of required settings without a value
        """
        return [name for name in REQUIRED_SETTINGS if not getattr(self, name)]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ContactFormConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            Populated configuration
        """
        env = os.environ if environ is None else environ

        return cls(
            sender_email=env.get("SENDER_EMAIL", ""),
            recipient_email=env.get("RECIPIENT_EMAIL", ""),
            captcha_secret=env.get("CLOUDFLARE_SECRET_KEY", ""),
            region=env.get("AWS_REGION") or DEFAULT_REGION,
            environment=env.get("ENV_TYPE") or "prod",
            subject_label=env.get("SUBJECT_LABEL") or DEFAULT_SUBJECT_LABEL,
            locale=env.get("MESSAGES_LOCALE") or DEFAULT_LOCALE,
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def describe(self) -> dict:
        """Settings safe to log (the captcha secret is masked)."""
        summary = {f.name: getattr(self, f.name) for f in fields(self)}
        summary["captcha_secret"] = "***" if self.captcha_secret else ""
        return summary
