"""
Contact Form Lambda

Serverless contact form backend: validates a Cloudflare Turnstile token and
the submitted fields, then forwards the message through Amazon SES.
"""

from contact_form.config import ContactFormConfig
from contact_form.handler import ContactFormHandler

__version__ = "1.0.0"

__all__ = ["ContactFormConfig", "ContactFormHandler", "__version__"]
