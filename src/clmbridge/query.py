"""Query normalizer built on the callback bridge.

query() is the single entry point every record lookup goes through. Host
failures never reach its caller: a failed host call is logged and degrades
to an empty list, so downstream resolvers treat "no rows" and "query
error" identically. Only a malformed request (empty collection or filter)
raises.
query_outcome() exposes the distinction for callers that need it.

Note: a failure inside the host (e.g. network) is indistinguishable from
a zero-row result at the query() level; the host does not report enough
to tell them apart reliably.
"""

import logging
from typing import List, Sequence, Union

from clmbridge.bridge import call_host
from clmbridge.errors import HostCallFailure, NotFoundError
from clmbridge.host.base import CLMHost, Record
from clmbridge.models import QueryOutcome, QueryRequest

logger = logging.getLogger(__name__)


async def query_outcome(host: CLMHost, request: QueryRequest) -> QueryOutcome:
    """Run a query and report rows, empty or error as distinct outcomes."""
    try:
        response = await call_host(
            lambda callback: host.query_record(
                request.collection,
                list(request.fields),
                request.filter,
                list(request.sort),
                request.limit,
                callback,
            ),
            operation=f"query_record({request.collection})",
        )
    except HostCallFailure as e:
        logger.warning(f"Query on {request.collection} failed: {e}")
        return QueryOutcome.failed(str(e))

    rows = response.get(request.collection)
    if not isinstance(rows, list):
        if rows is not None:
            logger.warning(
                f"Query on {request.collection} returned {type(rows).__name__}, expected list"
            )
        rows = []
    return QueryOutcome.from_rows(rows)


async def query(
    host: CLMHost,
    collection: str,
    fields: Sequence[str],
    filter: str,
    sort: Sequence[str],
    limit: Union[str, int] = "1",
) -> List[Record]:
    """Query a CRM collection and return its rows.

    The filter is passed through untouched; building a well-formed
    predicate is the caller's job.

    Args:
        host: Host API
        collection: Object name to query
        fields: Fields to return
        filter: Predicate text, e.g. "WHERE Id = 'a001'"
        sort: Sort clauses, e.g. ["Name, ASC"]
        limit: Row limit

    Returns:
        Rows of the collection; empty when nothing matched or the query failed

    Raises:
        pydantic.ValidationError: collection or filter is empty. Host
            failures never raise; only a malformed request does.
    """
    request = QueryRequest(
        collection=collection,
        fields=list(fields),
        filter=filter,
        sort=list(sort),
        limit=limit,
    )
    outcome = await query_outcome(host, request)
    return outcome.rows


def first_row(rows: Sequence[Record], subject: str, key: str = "") -> Record:
    """Return row 0, raising NotFoundError on an empty result.

    Args:
        rows: Query result
        subject: What was looked up, used in the error message
        key: Identifier that was looked up

    Raises:
        NotFoundError: rows is empty
    """
    if not rows:
        raise NotFoundError(subject, key)
    return rows[0]
