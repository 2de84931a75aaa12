"""Best-effort analysis logging to the spreadsheet endpoint."""

import logging
from datetime import datetime, timezone
from typing import Optional

import requests

from ..core.config import settings
from ..core.constants import TelemetryConstants
from ..core.exceptions import TelemetryError
from ..core.models import Interpretation, TelemetryEvent

logger = logging.getLogger(__name__)


class TelemetrySink:
    """Send one event per completed analysis. Never raises to the caller."""

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        variant: Optional[str] = None,
        event_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.endpoint = settings.telemetry_url if endpoint is None else endpoint
        self.variant = variant or settings.telemetry_variant
        self.event_name = event_name or settings.telemetry_event
        self.timeout = timeout or settings.request_timeout

    def build_event(
        self,
        review: str,
        interpretation: Interpretation,
        *,
        user_id: Optional[str] = None,
        url: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> TelemetryEvent:
        return TelemetryEvent(
            ts_iso=datetime.now(timezone.utc).isoformat(),
            event=self.event_name,
            variant=self.variant,
            user_id=user_id or TelemetryConstants.ANONYMOUS_USER,
            meta={
                "url": url or "",
                "userAgent": user_agent or TelemetryConstants.USER_AGENT,
                "sentiment": interpretation.label,
                "confidence": interpretation.score,
            },
            review=review,
            sentiment_label=interpretation.label,
            sentiment_confidence=interpretation.score,
        )

    def _post(self, event: TelemetryEvent) -> None:
        response = requests.post(
            self.endpoint,
            json=event.to_payload(),
            headers={"Content-Type": "application/json"},
            timeout=self.timeout,
        )
        if not response.ok:
            raise TelemetryError(f"Telemetry endpoint answered HTTP {response.status_code}")

    def send(self, event: TelemetryEvent) -> None:
        """Deliver ``event`` once. Failures are logged and dropped."""
        if not self.endpoint:
            logger.debug("[Sheets] No endpoint configured, skipping telemetry")
            return

        logger.info(f"[Sheets] Sending data: {event.event} ({event.sentiment_label})")
        try:
            self._post(event)
        except TelemetryError as e:
            logger.warning(f"[Sheets] {e}")
            return
        except Exception as e:
            logger.error(f"[Sheets] Error sending data: {e}")
            return
        logger.info("[Sheets] Data sent successfully")
