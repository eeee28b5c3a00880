"""QuoteMailer that records the e-mail in the log instead of sending it."""

from __future__ import annotations

import logging

from linkit.domain.service.quote_email import QuoteEmail, QuoteMailer

logger = logging.getLogger(__name__)


class LoggingQuoteMailer(QuoteMailer):

    def __init__(self) -> None:
        self.sent: list[QuoteEmail] = []

    def send_quote(self, email: QuoteEmail) -> None:
        self.sent.append(email)
        logger.info(
            "Quote e-mail queued",
            extra={
                "recipient": email.recipient,
                "subject": email.subject,
                "total_price": str(email.total_price),
            },
        )
