# -*- coding: utf-8 -*-

from .errors import InvalidDeferredReference
from .util import Thenable


class Promise(Thenable):
    """It represents an operation expected to be completed in the future.

    A Promise is the read-only handle of a Deferred. It contains a value not
    yet known when the Promise is created, and allows to register reactions
    who will be called as soon as the result is known. It's a "promise" of a
    future value.

    Unlike the Deferred, it can't be resolved nor rejected: the code owning
    the Deferred keeps this capability and gives the Promise to the
    consumers.
    """

    def __init__(self, deferred):
        """
        Args:
            deferred (Deferred): the Deferred driving this Promise.
        Raises:
            InvalidDeferredReference: if `deferred` is not a Deferred.
        """
        from .deferred import Deferred

        if not isinstance(deferred, Deferred):
            raise InvalidDeferredReference(
                'You must supply an instance of Deferred, not %r'
                % (deferred,))
        self._deferred = deferred

    def then(self, on_success, on_failure):
        """Create a new promise from reactions called when this one is settled.

        See ``Deferred.then()``.
        """
        return self._deferred.then(on_success, on_failure)

    def catch(self, on_failure):
        """Create a new promise with a reaction called when an error occurs.

        See ``Deferred.catch()``.
        """
        return self._deferred.catch(on_failure)

    def status(self):
        return self._deferred.status()

    def result(self):
        return self._deferred.result()

    def is_pending(self):
        return self._deferred.is_pending()

    def is_resolving(self):
        return self._deferred.is_resolving()

    def is_rejecting(self):
        return self._deferred.is_rejecting()

    def is_resolved(self):
        return self._deferred.is_resolved()

    def is_rejected(self):
        return self._deferred.is_rejected()

    def is_settled(self):
        return self._deferred.is_settled()

    def __repr__(self):
        return 'Promise(%r)' % self._deferred
