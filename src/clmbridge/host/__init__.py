"""Host API boundary.

Provides the CLMHost protocol consumed by every operation and FakeHost,
an offline implementation for tests and development.
"""

from clmbridge.host.base import CLMHost, HostCallback, HostResponse, Record
from clmbridge.host.fake import FakeHost

__all__ = [
    "CLMHost",
    "FakeHost",
    "HostCallback",
    "HostResponse",
    "Record",
]
