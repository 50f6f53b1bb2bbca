"""CLMClient: every public operation bound to one host.

Usage:
    client = CLMClient(host)

    client.go_to_slide("01-home")
    await client.go_to_dsp("12345")
    brand = await client.get_brand("Brand", ["p1"], "CUST-1")
    if brand.success:
        ...
"""

from typing import Any, List, Mapping, Optional, Sequence, Union

from clmbridge import lookups, navigation, tracking
from clmbridge.host.base import CLMHost, Record
from clmbridge.models import (
    BrandInfo,
    ClickstreamEvent,
    KeyMessageData,
    NavigationTarget,
    TrackingObject,
)
from clmbridge.query import query


class CLMClient:
    """Facade over the module-level operations.

    Holds no state besides the host; every call is independent.
    """

    def __init__(self, host: CLMHost):
        if not isinstance(host, CLMHost):
            raise TypeError(f"{type(host).__name__} does not implement CLMHost")
        self.host = host

    # Navigation

    def go_to_next_slide(self) -> None:
        navigation.go_to_next_slide(self.host)

    def go_to_previous_slide(self) -> None:
        navigation.go_to_previous_slide(self.host)

    def go_to_slide(self, slide: str, presentation: Optional[str] = None) -> Optional[str]:
        return navigation.go_to_slide(self.host, slide, presentation)

    async def go_to_dsp(
        self, document_id: str, media_file_name: Optional[str] = None
    ) -> Optional[NavigationTarget]:
        return await navigation.go_to_dsp(self.host, document_id, media_file_name)

    # Tracking

    def track_action(
        self, event: Union[TrackingObject, Mapping[str, Any]]
    ) -> Optional[ClickstreamEvent]:
        return tracking.track_action(self.host, event)

    # Lookups

    async def get_clm_slide_id(self) -> str:
        return await lookups.get_clm_slide_id(self.host)

    async def is_zoom_disabled(self) -> bool:
        return await lookups.is_zoom_disabled(self.host)

    async def get_current_account(self) -> Optional[Record]:
        return await lookups.get_current_account(self.host)

    async def get_account(self) -> Optional[Record]:
        return await lookups.get_account(self.host)

    async def get_brand(
        self, product_name: str, product_ids: Optional[Any], customer_id: str
    ) -> BrandInfo:
        return await lookups.get_brand(self.host, product_name, product_ids, customer_id)

    async def get_brand_info_data(
        self, brand_name: str, products: List[Record], customer_id: str
    ) -> BrandInfo:
        return await lookups.get_brand_info_data(self.host, brand_name, products, customer_id)

    async def get_key_message_data(self, id: Optional[str]) -> KeyMessageData:
        return await lookups.get_key_message_data(self.host, id)

    async def query(
        self,
        collection: str,
        fields: Sequence[str],
        filter: str,
        sort: Sequence[str],
        limit: Union[str, int] = "1",
    ) -> List[Record]:
        return await query(self.host, collection, fields, filter, sort, limit)
