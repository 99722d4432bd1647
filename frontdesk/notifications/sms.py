from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SmsGateway(Protocol):
    def send(self, to: str, body: str) -> None:
        raise NotImplementedError


class LoggingSmsGateway:
    """Stand-in gateway: writes the outbound message to the log and reports success."""

    def send(self, to: str, body: str) -> None:
        logger.info("SMS to %s: %s", to, body)
