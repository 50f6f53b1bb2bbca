"""Slide navigation and document reference resolution.

Navigation primitives forward straight to the host. go_to_dsp() resolves
an external document identifier into a concrete slide with a chain of
dependent lookups:

1. presentation by document id
2. explicit media file, if given (skips 3 and 4), otherwise
3. first slide of the presentation in display order
4. media file name of that slide's key message

Each step waits for the previous one. Navigation failures are silent to
the caller: every error is logged and the presentation stays where it is.
"""

import logging
from typing import Optional

from clmbridge.bridge import call_host
from clmbridge.errors import CLMBridgeError, MissingInputError, NotFoundError
from clmbridge.host.base import (
    KEY_MESSAGE_OBJECT,
    MEDIA_FILE_NAME_FIELD,
    PRESENTATION_OBJECT,
    PRESENTATION_SLIDE_OBJECT,
    CLMHost,
)
from clmbridge.models import NavigationTarget, normalize_slide_name
from clmbridge.query import first_row, query

logger = logging.getLogger(__name__)


# =============================================================================
# Navigation primitives
# =============================================================================


def go_to_next_slide(host: CLMHost) -> None:
    """Navigate to the next slide based on the CRM display order."""
    logger.info("Navigating to the next slide...")
    host.next_slide()


def go_to_previous_slide(host: CLMHost) -> None:
    """Navigate to the previous slide based on the CRM display order."""
    logger.info("Navigating to the previous slide...")
    host.prev_slide()


def go_to_slide(
    host: CLMHost, slide: str, presentation: Optional[str] = None
) -> Optional[str]:
    """Navigate to a slide, optionally in another presentation.

    Args:
        host: Host API
        slide: Slide name, with or without the .zip suffix (e.g. "01-home")
        presentation: Presentation identifier; None stays in the current one

    Returns:
        The normalized slide target that was sent to the host, or None when
        the slide name is empty and nothing was sent
    """
    if not slide or not slide.strip():
        logger.warning("Not navigating: slide name is empty")
        return None

    target = normalize_slide_name(slide)

    if presentation:
        logger.info(f"Navigating to {target} in {presentation}")
        host.goto_slide(target, presentation)
        return target

    logger.info(f"Navigating to {target}")
    host.goto_slide(target)
    return target


def navigate(host: CLMHost, target: NavigationTarget) -> None:
    go_to_slide(host, target.slide, target.presentation)


# =============================================================================
# Reference resolution
# =============================================================================


async def resolve_dsp_target(
    host: CLMHost, document_id: str, media_file_name: Optional[str] = None
) -> NavigationTarget:
    """Resolve a document identifier into a navigation target.

    Args:
        host: Host API
        document_id: Vault document id associated with a presentation
        media_file_name: Key message archive to open instead of the first slide

    Returns:
        NavigationTarget for the resolved slide and presentation

    Raises:
        MissingInputError: document_id is empty or blank
        NotFoundError: presentation, first slide or media file not found
        HostCallFailure: the media file lookup failed
    """
    if not document_id or not document_id.strip():
        raise MissingInputError("document_id")

    presentations = await query(
        host,
        PRESENTATION_OBJECT,
        ["Presentation_Id_vod__c", "Id"],
        f"WHERE Vault_Doc_Id_vod__c = '{document_id}'",
        ["Vault_Doc_Id_vod__c, ASC"],
        "1",
    )
    presentation = first_row(presentations, "presentation", document_id)
    presentation_record_id = presentation.get("Id")
    presentation_id = presentation.get("Presentation_Id_vod__c")

    if media_file_name:
        return NavigationTarget(slide=media_file_name, presentation=presentation_id)

    slides = await query(
        host,
        PRESENTATION_SLIDE_OBJECT,
        ["Key_Message_vod__c"],
        f"WHERE Clm_Presentation_vod__c = '{presentation_record_id}' AND Display_Order_vod__c = 1",
        ["Key_Message_vod__c, ASC"],
        "1",
    )
    key_message_id = first_row(slides, "key message", str(presentation_record_id)).get(
        "Key_Message_vod__c"
    )
    if not key_message_id:
        raise NotFoundError("key message", str(presentation_record_id))

    response = await call_host(
        lambda callback: host.get_data_for_object(
            KEY_MESSAGE_OBJECT, key_message_id, MEDIA_FILE_NAME_FIELD, callback
        ),
        operation=f"get_data_for_object({KEY_MESSAGE_OBJECT})",
    )
    key_message = response.get(KEY_MESSAGE_OBJECT) or {}
    media_file = key_message.get(MEDIA_FILE_NAME_FIELD)
    if not media_file:
        raise NotFoundError("media file", key_message_id)

    return NavigationTarget(slide=media_file, presentation=presentation_id)


async def go_to_dsp(
    host: CLMHost, document_id: str, media_file_name: Optional[str] = None
) -> Optional[NavigationTarget]:
    """Go to the home slide of a presentation identified by its document id.

    Opens media_file_name instead of the home slide when given.
    Never raises: failures are logged and no navigation happens.

    Returns:
        The target navigated to, or None when resolution failed
    """
    try:
        target = await resolve_dsp_target(host, document_id, media_file_name)
        navigate(host, target)
        return target
    except CLMBridgeError as e:
        logger.error(f"Could not open document {document_id!r}: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error opening document {document_id!r}: {e}")
    return None
