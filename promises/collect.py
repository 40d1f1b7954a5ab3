# -*- coding: utf-8 -*-

from functools import partial
import warnings

from .deferred import Deferred
from .util import is_thenable


def collect(*promises, backend=None, deferred_class=Deferred):
    """Create a Promise who waits a list of promises to be all resolved.

    The resulting Promise resolves when all of the promises are resolved.
    Its result values are the results of each promise, as tuples, keeping the
    order of the arguments (not the order of completion).
    If a promise is rejected, then the resulting promise is rejected with
    the same values, and all results from other promises are ignored.

    Values who are not Thenable are considered as promises already resolved
    with this value.

    Example:

        >>> p = collect(fetch_product(), fetch_reviews())
        >>> p.then(lambda product, reviews: ..., on_error)

    Args:
        *promises (Thenable)
        backend (NotificationBackend, optional): backend of the resulting
            promise. Default to the synchronous backend.
        deferred_class (type, optional): Deferred subclass used for the
            resulting promise.
    Returns:
        Promise: resulting promise, resolved when all promises are
            resolved, or rejected when one of the promises has been rejected.
    """
    all_done = deferred_class(backend=backend)
    results = [None] * len(promises)
    remaining = [len(promises)]

    def resolve_one_promise(index, *values):
        results[index] = values
        remaining[0] -= 1
        if remaining[0] == 0 and all_done.is_pending():
            all_done.resolve(*results)

    def reject_one_promise(*values):
        if all_done.is_pending():
            all_done.reject(*values)

    for index, p in enumerate(promises):
        if not is_thenable(p):
            p = deferred_class(backend=backend).resolve(p).promise
        p.then(partial(resolve_one_promise, index), reject_one_promise)

    if remaining[0] == 0 and all_done.is_pending():
        all_done.resolve(*results)
    return all_done.promise


def when(*promises, backend=None, deferred_class=Deferred):
    """Deprecated alias of ``collect()``."""
    warnings.warn("'when' is deprecated, please use 'collect' instead.",
                  DeprecationWarning, stacklevel=2)
    return collect(*promises, backend=backend, deferred_class=deferred_class)
