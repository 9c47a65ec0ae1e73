"""Amazon SES email sender."""

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from contact_form.composer import OutboundEmail
from contact_form.errors import EmailDeliveryError

logger = logging.getLogger(__name__)

CHARSET = "UTF-8"


class SesEmailSender:
    """Sends composed contact form emails through SES SendEmail."""

    def __init__(self, region: str, client: Optional[Any] = None) -> None:
        self.region = region
        self.client = client or boto3.client("ses", region_name=region)

    def send(self, email: OutboundEmail) -> str:
        """
        Send an email via SES.

        Args:
            email: Composed message

        Returns:
            SES MessageId

        Raises:
            EmailDeliveryError: SES rejected the request or was unreachable
        """
        try:
            response = self.client.send_email(
                Source=email.source,
                Destination={"ToAddresses": list(email.to_addresses)},
                ReplyToAddresses=list(email.reply_to_addresses),
                Message={
                    "Subject": {"Data": email.subject, "Charset": CHARSET},
                    "Body": {
                        "Html": {"Data": email.html_body, "Charset": CHARSET},
                        "Text": {"Data": email.text_body, "Charset": CHARSET},
                    },
                },
            )
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "Unknown")
            raise EmailDeliveryError(f"SES rejected the message ({error_code}): {e}") from e
        except BotoCoreError as e:
            raise EmailDeliveryError(f"SES request failed: {e}") from e

        message_id = response["MessageId"]
        logger.info(f"Email sent successfully with MessageId: {message_id}")
        return message_id
