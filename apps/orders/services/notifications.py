"""
Order notification service.

Order summaries are mailed best-effort: delivery runs on a small thread
pool so the HTTP response never waits on SMTP, and every failure is
logged and swallowed. A committed order is never affected by email
problems.

Set ``ORDER_EMAIL_ASYNC = False`` to deliver inline (used by the test
settings); failures are still only logged.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger(__name__)

_executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix='order-email')


def _deliver(recipient: str, summary: str) -> bool:
    try:
        send_mail(
            subject=settings.ORDER_EMAIL_SUBJECT,
            message=summary,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
        )
    except Exception:
        logger.exception("Failed to send order summary to %s", recipient)
        return False

    logger.info("Sent order summary to %s", recipient)
    return True


def send_order_summary(*, recipient: str, summary: str):
    """
    Mail an order summary without blocking the caller.

    Args:
        recipient: Email address of the customer
        summary: Plain-text order summary

    Returns:
        Future resolving to True/False when sent asynchronously, otherwise None
    """
    if not recipient:
        logger.warning("Order summary not sent: customer has no email address")
        return None

    if settings.ORDER_EMAIL_ASYNC:
        return _executor.submit(_deliver, recipient, summary)

    _deliver(recipient, summary)
    return None
