"""
notifications/services/dispatch.py

Email transport for every outbound notice.

Callers pass a template name and its context; the HTML body is
rendered from `templates/emails/` and a plain-text alternative is
derived from it. Transport errors are NOT swallowed here: the
caller decides whether a failure is fatal.
"""

import logging

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)


def render_email(template, context):
    html_body = render_to_string(template, context)
    text_body = strip_tags(html_body).strip()
    return text_body, html_body


def send_notification(*, to_email, subject, template, context=None):
    """
    Send one email.

    Returns True when the backend accepted the message, False when
    there was nothing to send (no address). Raises on transport
    failure (SMTPException, OSError, ...).
    """
    if not to_email:
        return False

    text_body, html_body = render_email(template, context or {})

    sent = send_mail(
        subject=subject,
        message=text_body,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=[to_email],
        html_message=html_body,
        fail_silently=False,
    )

    logger.debug("Sent '%s' to %s (template=%s)", subject, to_email, template)
    return bool(sent)


def send_notification_safely(**kwargs):
    """
    Fire-and-forget variant for real-time notices raised from
    model signals: a mail outage must never fail the save.
    """
    try:
        return send_notification(**kwargs)
    except Exception:
        logger.exception(
            "Failed to send '%s' to %s",
            kwargs.get("subject"), kwargs.get("to_email"),
        )
        return False
