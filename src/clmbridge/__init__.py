"""clmbridge: async adapter between an embedded CLM viewer and its CRM host.

This package provides:
- A callback bridge turning host callbacks into awaitables
- A query normalizer that degrades host failures to empty results
- Document reference resolution (go_to_dsp) and slide navigation
- Typed account / brand / key message lookups with result envelopes
- Fire-and-forget call clickstream tracking
"""

from clmbridge.bridge import call_host, interpret_response
from clmbridge.client import CLMClient
from clmbridge.errors import (
    CLMBridgeError,
    ErrorKind,
    HostCallFailure,
    MissingInputError,
    NotFoundError,
)
from clmbridge.host import CLMHost, FakeHost
from clmbridge.lookups import (
    get_account,
    get_brand,
    get_brand_info_data,
    get_clm_slide_id,
    get_current_account,
    get_key_message_data,
    is_zoom_disabled,
)
from clmbridge.models import (
    BrandInfo,
    ClickstreamEvent,
    KeyMessageData,
    NavigationTarget,
    QueryOutcome,
    QueryRequest,
    QueryStatus,
    TrackingObject,
    normalize_slide_name,
)
from clmbridge.navigation import (
    go_to_dsp,
    go_to_next_slide,
    go_to_previous_slide,
    go_to_slide,
    resolve_dsp_target,
)
from clmbridge.query import first_row, query, query_outcome
from clmbridge.tracking import track_action

__all__ = [
    "BrandInfo",
    "CLMBridgeError",
    "CLMClient",
    "CLMHost",
    "ClickstreamEvent",
    "ErrorKind",
    "FakeHost",
    "HostCallFailure",
    "KeyMessageData",
    "MissingInputError",
    "NavigationTarget",
    "NotFoundError",
    "QueryOutcome",
    "QueryRequest",
    "QueryStatus",
    "TrackingObject",
    "call_host",
    "first_row",
    "get_account",
    "get_brand",
    "get_brand_info_data",
    "get_clm_slide_id",
    "get_current_account",
    "get_key_message_data",
    "go_to_dsp",
    "go_to_next_slide",
    "go_to_previous_slide",
    "go_to_slide",
    "interpret_response",
    "is_zoom_disabled",
    "normalize_slide_name",
    "query",
    "query_outcome",
    "resolve_dsp_target",
    "track_action",
]
