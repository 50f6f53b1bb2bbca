"""Test configuration and fixtures."""

import logging

import pytest

from clmbridge.host import FakeHost


@pytest.fixture
def host() -> FakeHost:
    """Provide an empty fake host."""
    return FakeHost()


@pytest.fixture
def dsp_host() -> FakeHost:
    """Provide a host that resolves document DOC123 to intro.zip in P1."""
    host = FakeHost()
    host.add_rows(
        "Clm_Presentation_vod__c",
        [{"Id": "a001", "Presentation_Id_vod__c": "P1"}],
    )
    host.add_rows("Clm_Presentation_Slide_vod__c", [{"Key_Message_vod__c": "KM1"}])
    host.set_object("Key_Message_vod__c", "KM1", {"Media_File_Name_vod__c": "intro.zip"})
    return host


@pytest.fixture
def info_logs(caplog):
    """Capture clmbridge logs at DEBUG level."""
    caplog.set_level(logging.DEBUG, logger="clmbridge")
    return caplog
