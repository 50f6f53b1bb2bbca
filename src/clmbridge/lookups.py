"""Typed CRM lookups for the presentation layer.

Each lookup resolves a "current object" or caller-supplied identifier and
issues one or two queries through the normalizer. Brand and key message
lookups always return an envelope (success or failure) and never raise;
callers branch on envelope.success instead of catching.
"""

import logging
from typing import Any, List, Optional

from clmbridge.bridge import call_host
from clmbridge.config import config
from clmbridge.errors import CLMBridgeError, HostCallFailure, MissingInputError, NotFoundError
from clmbridge.host.base import (
    ACCOUNT_KEY_MESSAGE_OBJECT,
    ACCOUNT_OBJECT,
    CLM_ID_FIELD,
    CURRENT_KEY_MESSAGE,
    DISABLE_ACTIONS_FIELD,
    KEY_MESSAGE_FACT_OBJECT,
    PRODUCT_OBJECT,
    ZOOM_ACTION,
    CLMHost,
    Record,
)
from clmbridge.models import BrandInfo, KeyMessageData, as_text
from clmbridge.query import first_row, query

logger = logging.getLogger(__name__)


async def _current_key_message_field(host: CLMHost, field: str, failure: str) -> Any:
    response = await call_host(
        lambda callback: host.get_data_for_current_object(CURRENT_KEY_MESSAGE, field, callback),
        operation=f"get_data_for_current_object({CURRENT_KEY_MESSAGE}.{field})",
        default_message=failure,
    )
    key_message = response.get(CURRENT_KEY_MESSAGE)
    if not isinstance(key_message, dict):
        raise HostCallFailure(failure, operation="get_data_for_current_object", response=response)
    return key_message.get(field)


async def get_clm_slide_id(host: CLMHost) -> str:
    """Get the CLM ID of the current slide.

    Raises:
        HostCallFailure: The host could not provide the current key message
    """
    return as_text(await _current_key_message_field(host, CLM_ID_FIELD, "Failed to get CLM ID"))


async def is_zoom_disabled(host: CLMHost) -> bool:
    """Check whether zoom is among the disabled actions of the current slide.

    Raises:
        HostCallFailure: The host could not provide the current key message
    """
    actions = await _current_key_message_field(
        host, DISABLE_ACTIONS_FIELD, "Failed to get disabled actions"
    )
    return ZOOM_ACTION in as_text(actions)


async def get_current_account(host: CLMHost) -> Optional[Record]:
    """Get the account currently in context, or None if the host has none."""
    try:
        response = await call_host(
            lambda callback: host.get_data_for_current_object(ACCOUNT_OBJECT, "Id", callback),
            operation=f"get_data_for_current_object({ACCOUNT_OBJECT})",
        )
    except HostCallFailure as e:
        logger.warning(f"Could not get current account: {e}")
        return None

    logger.debug(f"Getting data for current account... {dict(response)}")
    account = response.get(ACCOUNT_OBJECT)
    return account if isinstance(account, dict) else None


async def get_account(host: CLMHost) -> Optional[Record]:
    """Get the full record of the current account.

    Returns:
        The account record, or None (logged) when there is no current
        account or the query returned nothing
    """
    current = await get_current_account(host)
    account_id = (current or {}).get("Id")
    if not account_id:
        logger.warning("No current account; skipping account query")
        return None

    rows = await query(
        host,
        ACCOUNT_OBJECT,
        config.account_fields,
        f"WHERE Id = '{account_id}'",
        ["Name, ASC"],
        "1",
    )
    try:
        return first_row(rows, "account", account_id)
    except NotFoundError as e:
        logger.warning(str(e))
        return None


async def get_brand_info_data(
    host: CLMHost, brand_name: str, products: List[Record], customer_id: str
) -> BrandInfo:
    """Get the key message info of a brand for a customer.

    Args:
        host: Host API
        brand_name: Product name, echoed in the envelope
        products: Product rows (first one is used)
        customer_id: Customer identifier

    Returns:
        BrandInfo envelope
    """
    try:
        product = first_row(products, "product", brand_name)
        external_id = as_text(product.get("External_ID_vod__c"))
        rows = await query(
            host,
            ACCOUNT_KEY_MESSAGE_OBJECT,
            ["Id", "KeyMessageCodes__c", "KeyMessage__c"],
            f"WHERE External_Id__c = '{customer_id}:{external_id}'",
            ["Name, ASC"],
            "1",
        )
        record = first_row(rows, "account key message", f"{customer_id}:{external_id}")
        return BrandInfo(
            success=True,
            message="Success",
            product=as_text(brand_name),
            product_id=as_text(product.get("Id")),
            record_id=as_text(record.get("Id")),
            key_messages=as_text(record.get("KeyMessage__c")),
            key_message_codes=as_text(record.get("KeyMessageCodes__c")),
        )
    except CLMBridgeError as e:
        return BrandInfo.failure(e.message or config.default_error_message)
    except Exception as e:
        logger.exception(f"Unexpected error getting brand info for {brand_name!r}")
        return BrandInfo.failure(str(e) or config.default_error_message)


async def get_brand(
    host: CLMHost,
    product_name: str,
    product_ids: Optional[Any],
    customer_id: str,
) -> BrandInfo:
    """Get the brand info based on HCP and product.

    Args:
        host: Host API
        product_name: Name of the product
        product_ids: Product ids known to the caller; only checked for presence
        customer_id: Customer identifier

    Returns:
        BrandInfo envelope; never raises
    """
    if not product_ids:
        logger.error("Product id is missing")

    try:
        if not product_name:
            raise MissingInputError("product_name")
        if not customer_id:
            raise MissingInputError("customer_id")

        products = await query(
            host,
            PRODUCT_OBJECT,
            ["Id", "External_ID_vod__c"],
            f"WHERE Name = '{product_name}'",
            ["Name, ASC"],
            "1",
        )
        return await get_brand_info_data(host, product_name, products, customer_id)
    except CLMBridgeError as e:
        logger.warning(f"Brand lookup failed: {e}")
        return BrandInfo.failure(e.message or config.default_error_message)
    except Exception as e:
        logger.exception(f"Unexpected error getting brand {product_name!r}")
        return BrandInfo.failure(str(e) or config.default_error_message)


async def get_key_message_data(host: CLMHost, id: Optional[str]) -> KeyMessageData:
    """Get account key message fact data by Id or External_Id__c.

    Returns a failure envelope without querying when id is empty or blank.
    """
    if not id or not id.strip():
        logger.error("External_Id__c is missing")
        return KeyMessageData.failure("External_Id__c is missing")

    try:
        rows = await query(
            host,
            KEY_MESSAGE_FACT_OBJECT,
            ["Id", "Type__c", "Value__c", "External_Id__c"],
            f"WHERE Id = '{id}' or External_Id__c = '{id}'",
            ["Type__c, ASC"],
            "1",
        )
        return KeyMessageData.from_record(first_row(rows, "key message fact", id))
    except CLMBridgeError as e:
        logger.warning(f"Key message lookup failed: {e}")
        return KeyMessageData.failure(e.message or config.default_error_message)
    except Exception as e:
        logger.exception(f"Unexpected error getting key message {id!r}")
        return KeyMessageData.failure(str(e) or config.default_error_message)
