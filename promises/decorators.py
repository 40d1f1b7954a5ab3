# -*- coding: utf-8 -*-

from functools import partial, wraps

from .deferred import Deferred
from .util import is_thenable


def wrap_promise(f=None, backend=None):
    """Decorator who converts the result in a Promise object.

    If the function decorated returns a thenable, it's transmitted as is.
    Else, a new Promise is created with the returned value as result (a tuple
    gives several values). If the function raises an exception, the Promise
    is rejected with it.

    It can be used directly (``@wrap_promise``), or with a notification
    backend for the created promises (``@wrap_promise(backend=backend)``).
    """
    if f is None:
        return partial(wrap_promise, backend=backend)

    @wraps(f)
    def wrapper(*args, **kwargs):
        df = Deferred(backend=backend)
        try:
            result = f(*args, **kwargs)
        except Exception as error:
            return df.reject(error).promise

        if is_thenable(result):
            return result
        if isinstance(result, tuple):
            return df.resolve(*result).promise
        return df.resolve(result).promise

    return wrapper
