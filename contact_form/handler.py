"""
Contact Form Request Handler

Processes one API Gateway event end to end:
- CORS headers on every response, OPTIONS preflight short-circuit
- JSON body parsing and required field validation
- Cloudflare Turnstile verification
- Email composition and delivery through Amazon SES

Each pipeline step returns either its value or a Failure. The handler maps
the failure kind to the HTTP status code, so every path ends in a
well-formed response.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict, Optional, Union

from contact_form import messages
from contact_form.captcha import TurnstileVerifier
from contact_form.composer import compose_email
from contact_form.config import ContactFormConfig
from contact_form.errors import ContactFormError, ErrorKind, Failure
from contact_form.mailer import SesEmailSender
from contact_form.models import ResponseEnvelope, SubmissionRequest
from contact_form.responses import (
    build_cors_headers,
    default_cors_headers,
    error_response,
    get_method,
    preflight_response,
    success_response,
)

logger = logging.getLogger(__name__)

FAILURE_MESSAGES = {
    ErrorKind.VALIDATION: messages.MISSING_FIELDS,
    ErrorKind.CAPTCHA_REJECTED: messages.CAPTCHA_FAILED,
    ErrorKind.UNEXPECTED: messages.SERVER_ERROR,
}


class ContactFormHandler:
    """
    Handles contact form submissions.

    Collaborators are injected so the hosting layer (or a test) decides how
    captcha verification and email delivery are performed.
    """

    def __init__(
        self,
        config: ContactFormConfig,
        verifier: Optional[Any] = None,
        sender: Optional[Any] = None,
    ) -> None:
        """
        Args:
            config: Addresses, captcha secret and environment settings
            verifier: Object with verify(token) -> CaptchaResult
            sender: Object with send(OutboundEmail) -> message id
        """
        self.config = config
        self.verifier = verifier or TurnstileVerifier(config.captcha_secret)
        self.sender = sender or SesEmailSender(config.region)
        self.messages = messages.get_catalog(config.locale)

    def handle(self, event: Dict[str, Any]) -> ResponseEnvelope:
        """
        Handle a single API Gateway proxy event.

        Args:
            event: API Gateway event (REST or HTTP API payload)

        Returns:
            Response envelope, never raises
        """
        headers = default_cors_headers()

        try:
            headers = build_cors_headers(event)

            if get_method(event) == "OPTIONS":
                return preflight_response(headers)

            outcome = self._process(event)
        except Exception as e:
            logger.error(f"Handler Error: {str(e)}", exc_info=True)
            return error_response(500, headers, self.messages[messages.SERVER_ERROR])

        if isinstance(outcome, Failure):
            return self._failure_response(outcome, headers)

        return success_response(headers, self.messages[messages.SENT])

    def _process(self, event: Dict[str, Any]) -> Optional[Failure]:
        body = self.parse_body(event)
        if isinstance(body, Failure):
            return body

        submission = self.validate(body)
        if isinstance(submission, Failure):
            return submission

        rejected = self.verify_captcha(submission)
        if rejected is not None:
            return rejected

        sent = self.send(submission)
        if isinstance(sent, Failure):
            return sent

        return None

    def parse_body(self, event: Dict[str, Any]) -> Union[Dict[str, Any], Failure]:
        raw = event.get("body") or "{}"

        try:
            if event.get("isBase64Encoded"):
                raw = base64.b64decode(raw).decode("utf-8")
            body = json.loads(raw)
        except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
            return Failure(ErrorKind.UNEXPECTED, f"Invalid request body: {str(e)}", e)

        if not isinstance(body, dict):
            return Failure(ErrorKind.UNEXPECTED, "Request body is not a JSON object")

        return body

    def validate(self, body: Dict[str, Any]) -> Union[SubmissionRequest, Failure]:
        submission = SubmissionRequest.from_body(body)
        if not submission.is_complete():
            return Failure(ErrorKind.VALIDATION, "Missing required fields or consent")
        return submission

    def verify_captcha(self, submission: SubmissionRequest) -> Optional[Failure]:
        try:
            result = self.verifier.verify(submission.captcha_token)
        except ContactFormError as e:
            return Failure(ErrorKind.UNEXPECTED, str(e), e)

        if not result.success:
            logger.warning(f"Captcha fail: {json.dumps(result.raw, default=str)}")
            return Failure(ErrorKind.CAPTCHA_REJECTED, ", ".join(result.error_codes))

        return None

    def send(self, submission: SubmissionRequest) -> Union[str, Failure]:
        email = compose_email(submission, self.config)
        try:
            return self.sender.send(email)
        except ContactFormError as e:
            return Failure(ErrorKind.UNEXPECTED, str(e), e)

    def _failure_response(self, failure: Failure, headers: Dict[str, str]) -> ResponseEnvelope:
        if failure.kind is ErrorKind.VALIDATION:
            logger.info(f"Rejected incomplete submission: {failure.detail}")
        elif failure.kind is ErrorKind.UNEXPECTED:
            logger.error(f"Handler Error: {failure.detail}", exc_info=failure.exception)

        error = self.messages[FAILURE_MESSAGES[failure.kind]]
        return error_response(failure.status_code, headers, error)
