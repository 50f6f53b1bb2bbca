"""Fake host for deterministic testing and offline development.

This host implements the CLMHost protocol without an embedding viewer.
It supports:
- Canned query rows per collection (FIFO queue, then a sticky default)
- Canned current-object and per-record object data
- Configurable failures, synchronous raises and raw responses per operation
- Held operations whose callbacks are recorded but never fired
- Deferred callback delivery on the running event loop
"""

import asyncio
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from clmbridge.host.base import HostCallback, Record


class FakeHost:
    """Deterministic CLM host for testing.

    Usage:
        host = FakeHost()

        # Rows returned for a collection
        host.add_rows("Clm_Presentation_vod__c", [{"Id": "a001"}])

        # Or use a queue for sequential queries on the same collection
        host.queue_rows("Product_vod__c", [])

        # Error paths
        host.fail("query_record", message="offline")
        host.hold("create_record")  # callback never fires

        # Use in tests
        await go_to_dsp(host, "DOC123")
        assert host.navigation_log == [("intro.zip", "P1")]
    """

    def __init__(self, deferred: bool = False):
        """Initialize fake host.

        Args:
            deferred: Deliver callbacks through loop.call_soon instead of
                invoking them before the host call returns
        """
        self.deferred = deferred
        self._rows: Dict[str, List[Record]] = {}
        self._row_queues: Dict[str, List[List[Record]]] = {}
        self._current_objects: Dict[str, Dict[str, Any]] = {}
        self._objects: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self._failures: Dict[str, Optional[str]] = {}
        self._raises: Dict[str, Exception] = {}
        self._raw_responses: Dict[str, Any] = {}
        self._held: set = set()
        self._record_counter = 0
        self._call_log: List[Dict[str, Any]] = []
        self.held_callbacks: List[HostCallback] = []

    # =========================================================================
    # Configuration
    # =========================================================================

    def add_rows(self, collection: str, rows: List[Record]) -> "FakeHost":
        """Set the default rows returned for a collection."""
        self._rows[collection] = list(rows)
        return self

    def queue_rows(self, collection: str, rows: List[Record]) -> "FakeHost":
        """Queue rows for the next query on a collection (FIFO)."""
        self._row_queues.setdefault(collection, []).append(list(rows))
        return self

    def set_current_object(self, object_kind: str, fields: Dict[str, Any]) -> "FakeHost":
        """Set the fields of the object currently in context."""
        self._current_objects[object_kind] = dict(fields)
        return self

    def set_object(
        self, object_kind: str, record_id: str, fields: Dict[str, Any]
    ) -> "FakeHost":
        """Set the fields of a single record."""
        self._objects[(object_kind, record_id)] = dict(fields)
        return self

    def fail(self, operation: str, message: Optional[str] = None) -> "FakeHost":
        """Report failure for every call to an operation.

        Args:
            operation: Host method name (e.g. "query_record")
            message: Optional message; omitted from the response when None
        """
        self._failures[operation] = message
        return self

    def raise_on(self, operation: str, error: Exception) -> "FakeHost":
        """Raise synchronously when an operation is called."""
        self._raises[operation] = error
        return self

    def respond_with(self, operation: str, response: Any) -> "FakeHost":
        """Deliver a raw response object instead of a well-formed one."""
        self._raw_responses[operation] = response
        return self

    def hold(self, operation: str) -> "FakeHost":
        """Record callbacks for an operation without ever firing them."""
        self._held.add(operation)
        return self

    # =========================================================================
    # Call log
    # =========================================================================

    @property
    def call_log(self) -> List[Dict[str, Any]]:
        """Return a copy of every call made to the host."""
        return list(self._call_log)

    @property
    def navigation_log(self) -> List[Tuple[str, Optional[str]]]:
        """Return (target, presentation) for every goto_slide call."""
        return [
            (call["args"]["target"], call["args"]["presentation"])
            for call in self._call_log
            if call["operation"] == "goto_slide"
        ]

    def calls_for(self, operation: str) -> List[Dict[str, Any]]:
        """Return the argument dicts of every call to an operation."""
        return [call["args"] for call in self._call_log if call["operation"] == operation]

    def call_count(self, operation: Optional[str] = None) -> int:
        """Count calls to an operation, or all calls when omitted."""
        if operation is None:
            return len(self._call_log)
        return len(self.calls_for(operation))

    def was_called(self, operation: str) -> bool:
        """Check if an operation was called."""
        return self.call_count(operation) > 0

    def _log_call(self, operation: str, args: Dict[str, Any]) -> None:
        self._call_log.append({"operation": operation, "args": args})
        error = self._raises.get(operation)
        if error is not None:
            raise error

    # =========================================================================
    # Response delivery
    # =========================================================================

    def _deliver(
        self,
        operation: str,
        callback: HostCallback,
        build: Callable[[], Any],
    ) -> None:
        if operation in self._held:
            self.held_callbacks.append(callback)
            return

        if operation in self._raw_responses:
            response = self._raw_responses[operation]
        elif operation in self._failures:
            response = {"success": False}
            message = self._failures[operation]
            if message is not None:
                response["message"] = message
        else:
            response = build()

        if self.deferred:
            asyncio.get_running_loop().call_soon(callback, response)
        else:
            callback(response)

    def _next_rows(self, collection: str) -> List[Record]:
        queue = self._row_queues.get(collection)
        if queue:
            return queue.pop(0)
        return list(self._rows.get(collection, []))

    # =========================================================================
    # CLMHost implementation
    # =========================================================================

    def next_slide(self) -> None:
        self._log_call("next_slide", {})

    def prev_slide(self) -> None:
        self._log_call("prev_slide", {})

    def goto_slide(self, target: str, presentation: Optional[str] = None) -> None:
        self._log_call("goto_slide", {"target": target, "presentation": presentation})

    def query_record(
        self,
        collection: str,
        fields: List[str],
        filter: str,
        sort: List[str],
        limit: Union[str, int],
        callback: HostCallback,
    ) -> None:
        self._log_call(
            "query_record",
            {
                "collection": collection,
                "fields": list(fields),
                "filter": filter,
                "sort": list(sort),
                "limit": limit,
            },
        )
        self._deliver(
            "query_record",
            callback,
            lambda: {"success": True, collection: self._next_rows(collection)},
        )

    def get_data_for_current_object(
        self, object_kind: str, field: str, callback: HostCallback
    ) -> None:
        self._log_call(
            "get_data_for_current_object", {"object_kind": object_kind, "field": field}
        )

        def build() -> Dict[str, Any]:
            fields = self._current_objects.get(object_kind)
            if fields is None:
                return {"success": False, "message": f"No current {object_kind}"}
            return {"success": True, object_kind: {field: fields.get(field)}}

        self._deliver("get_data_for_current_object", callback, build)

    def get_data_for_object(
        self, object_kind: str, record_id: str, field: str, callback: HostCallback
    ) -> None:
        self._log_call(
            "get_data_for_object",
            {"object_kind": object_kind, "record_id": record_id, "field": field},
        )

        def build() -> Dict[str, Any]:
            fields = self._objects.get((object_kind, record_id))
            if fields is None:
                return {"success": False, "message": f"No {object_kind} with Id {record_id}"}
            return {"success": True, object_kind: {field: fields.get(field)}}

        self._deliver("get_data_for_object", callback, build)

    def create_record(
        self, collection: str, payload: Mapping[str, Any], callback: HostCallback
    ) -> None:
        self._log_call("create_record", {"collection": collection, "payload": dict(payload)})

        def build() -> Dict[str, Any]:
            self._record_counter += 1
            return {"success": True, collection: {"ID": f"fake-{self._record_counter}"}}

        self._deliver("create_record", callback, build)
