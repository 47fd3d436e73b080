"""Internal helper functions."""

from __future__ import annotations

import functools
import json
import logging
from typing import Callable, Iterator, Optional

from google.auth.exceptions import GoogleAuthError
from googleapiclient.errors import HttpError

logger = logging.getLogger(__name__)

# Query keys consumed by the pager; never sent on the wire.
_PAGINATION_OPTIONS = ("autoPaginate", "maxApiCalls", "maxResults")

# Failures reported to callbacks instead of being raised.
_REQUEST_ERRORS = (HttpError, GoogleAuthError, OSError)

Page = tuple[list, Optional[dict], dict]


def _join_uri(*components: str) -> str:
    """Join URI components with single slashes, keeping ``:verb`` suffixes attached.

    ``_join_uri("/projects", "p1", ":getIamPolicy")`` gives ``"projects/p1:getIamPolicy"``.
    """
    parts = [c.strip("/") for c in components if c and c.strip("/")]
    return "/".join(parts).replace("/:", ":")


def _request_query(options: dict) -> dict:
    """Options minus the pager's own keys, ready to go on the query string."""
    return {k: v for k, v in options.items() if k not in _PAGINATION_OPTIONS and v is not None}


def _next_query(options: dict, response: dict) -> Optional[dict]:
    """Continuation query for the next page, or ``None`` on the last page."""
    token = response.get("nextPageToken")
    if not token:
        return None
    return {**options, "pageToken": token}


def _walk_pages(fetch_page: Callable[[dict], Page], options: Optional[dict]) -> Iterator[Page]:
    """Yield ``(items, next_query, response)`` pages, one request at a time.

    Stops when a page has no continuation, after ``maxApiCalls`` requests, or
    once ``maxResults`` items were yielded. A page cut short by ``maxResults``
    has no continuation, since its ``nextPageToken`` would skip the cut items.
    """
    query: Optional[dict] = dict(options or {})
    max_api_calls = query.get("maxApiCalls")
    max_results = query.get("maxResults")
    calls = 0
    seen = 0

    while query is not None:
        items, next_query, response = fetch_page(query)
        calls += 1
        if max_results is not None and seen + len(items) > max_results:
            items = items[: max_results - seen]
            next_query = None
        seen += len(items)
        logger.debug("Fetched page %d with %d item(s)", calls, len(items))

        yield items, next_query, response

        if max_api_calls is not None and calls >= max_api_calls:
            return
        if max_results is not None and seen >= max_results:
            return
        query = next_query


def _collect_pages(fetch_page: Callable[[dict], Page], options: Optional[dict]) -> Page:
    """Run :func:`_walk_pages` to completion and merge the pages."""
    results: list = []
    next_query: Optional[dict] = None
    response: dict = {}
    for items, next_query, response in _walk_pages(fetch_page, options):
        results.extend(items)
    return results, next_query, response


def _paged(fetch_page: Callable[[dict], Page], options: Optional[dict]) -> Page:
    """Single page when ``autoPaginate`` is False, otherwise every page."""
    options = dict(options or {})
    if options.get("autoPaginate", True) is False:
        return fetch_page(options)
    return _collect_pages(fetch_page, options)


def _error_response(err: Exception) -> Optional[dict]:
    """Parsed JSON body of an ``HttpError``, if it has one."""
    if not isinstance(err, HttpError):
        return None
    try:
        return json.loads(err.content.decode("utf-8"))
    except (ValueError, UnicodeDecodeError, AttributeError):
        return None


def _with_callback(arity: int = 1):
    """Give a method an optional keyword-only ``callback``.

    Without a callback the method returns its result and raises request
    errors. With one, the result is passed as ``callback(None, *result)`` and
    request errors as ``callback(err, None, ..., error_response)`` with the
    same number of arguments; the method then returns ``None``.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, callback: Optional[Callable] = None, **kwargs):
            if callback is None:
                return func(*args, **kwargs)

            try:
                result = func(*args, **kwargs)
            except _REQUEST_ERRORS as err:
                callback(err, *([None] * (arity - 1)), _error_response(err))
                return None

            if arity == 1:
                callback(None, result)
            else:
                callback(None, *result)
            return None

        return wrapper

    return decorator
