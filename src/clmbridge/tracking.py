"""Call clickstream tracking.

track_action() records an interaction for the "CLM - Calls w/ Call
Clickstream" report. It is fire-and-forget: the record is logged locally,
submitted to the host and the function returns immediately. Submission
failures are logged and never reach the caller.
"""

import logging
from typing import Any, Mapping, Optional, Union

from clmbridge.bridge import interpret_response
from clmbridge.host.base import CLICKSTREAM_OBJECT, CLMHost
from clmbridge.models import ClickstreamEvent, TrackingObject

logger = logging.getLogger(__name__)


def _on_record_created(response: Any) -> None:
    success, message = interpret_response(response)
    if success:
        logger.debug(f"Clickstream record created: {dict(response)}")
    else:
        logger.warning(f"Clickstream record was not created: {message}")


def track_action(
    host: CLMHost, tracking: Union[TrackingObject, Mapping[str, Any]]
) -> Optional[ClickstreamEvent]:
    """Track an interaction on the current slide.

    Args:
        host: Host API
        tracking: {id, type, description} of the element interacted with

    Returns:
        The submitted event, or None if it could not be built or submitted
    """
    try:
        if not isinstance(tracking, TrackingObject):
            tracking = TrackingObject.model_validate(dict(tracking))
        event = ClickstreamEvent.from_tracking(tracking)
        payload = event.to_payload()

        logger.info(f"Creating record: {payload}")
        host.create_record(CLICKSTREAM_OBJECT, payload, _on_record_created)
        return event
    except Exception as e:
        logger.error(f"Could not track action: {e}")
        return None
