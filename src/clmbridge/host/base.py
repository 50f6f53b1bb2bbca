"""Host API protocol for the embedding CLM runtime.

The host is the viewer's callback-based interface for navigation and
record access. Every data operation takes a completion callback that
receives exactly one mapping:

    {"success": True, "<collection>": [rows]}          # query_record
    {"success": True, "<objectKind>": {field: value}}  # get_data_for_*
    {"success": False, "message": "..."}               # any failure

Implementations do NOT:
- Retry failed calls
- Enforce timeouts
- Cache results between calls
"""

from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

# A single CRM record: field name -> value (text or None in practice)
Record = Dict[str, Any]

HostResponse = Mapping[str, Any]
HostCallback = Callable[[Any], None]


# =============================================================================
# CRM object and field names
# =============================================================================

PRESENTATION_OBJECT = "Clm_Presentation_vod__c"
PRESENTATION_SLIDE_OBJECT = "Clm_Presentation_Slide_vod__c"
KEY_MESSAGE_OBJECT = "Key_Message_vod__c"
CURRENT_KEY_MESSAGE = "KeyMessage"
ACCOUNT_OBJECT = "Account"
PRODUCT_OBJECT = "Product_vod__c"
ACCOUNT_KEY_MESSAGE_OBJECT = "Account_Key_Message__c"
KEY_MESSAGE_FACT_OBJECT = "Account_Key_Message_Fact__c"
CLICKSTREAM_OBJECT = "Call_Clickstream_vod__c"

MEDIA_FILE_NAME_FIELD = "Media_File_Name_vod__c"
CLM_ID_FIELD = "CLM_ID_vod__c"
DISABLE_ACTIONS_FIELD = "Disable_Actions_vod__c"
ZOOM_ACTION = "Zoom_vod"


@runtime_checkable
class CLMHost(Protocol):
    """Protocol for the embedding viewer's host API.

    Navigation calls are fire-and-forget. Data calls report their outcome
    only through the callback; a host may invoke it synchronously or later
    from its event loop.
    """

    def next_slide(self) -> None:
        """Navigate to the next slide in display order."""
        ...

    def prev_slide(self) -> None:
        """Navigate to the previous slide in display order."""
        ...

    def goto_slide(self, target: str, presentation: Optional[str] = None) -> None:
        """Navigate to a key message archive, optionally in another presentation."""
        ...

    def query_record(
        self,
        collection: str,
        fields: List[str],
        filter: str,
        sort: List[str],
        limit: Union[str, int],
        callback: HostCallback,
    ) -> None:
        """Run a structured query against the CRM record store."""
        ...

    def get_data_for_current_object(
        self, object_kind: str, field: str, callback: HostCallback
    ) -> None:
        """Read a field of the object currently in context (account, key message...)."""
        ...

    def get_data_for_object(
        self, object_kind: str, record_id: str, field: str, callback: HostCallback
    ) -> None:
        """Read a field of a single record by identifier."""
        ...

    def create_record(
        self, collection: str, payload: Mapping[str, Any], callback: HostCallback
    ) -> None:
        """Create a record in the CRM record store."""
        ...
