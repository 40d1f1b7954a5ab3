# -*- coding: utf-8 -*-


class PromiseError(Exception):
    """Base class of all errors raised by the promises package."""
    pass


class InvalidCallback(PromiseError, TypeError):
    """`then()` has been called without two callable reactions."""
    pass


class InvalidDeferredReference(PromiseError, TypeError):
    """A Promise has been created without a valid Deferred behind it."""
    pass


class UnknownBackend(PromiseError, ValueError):
    """No notification backend is registered under the requested name."""
    pass


class RejectedError(PromiseError):
    """Rejection whose values are not an exception.

    A Deferred can be rejected with any values. When such a rejection must be
    raised (ex: thrown into a coroutine), the values are wrapped in this error.

    Attributes:
        values (tuple): the values of the rejection.
    """

    def __init__(self, *values):
        PromiseError.__init__(self, *values)
        self.values = values
