# -*- coding: utf-8 -*-

from collections import namedtuple
import logging

from .backends import default_backend
from .errors import InvalidCallback
from .promise import Promise
from .util import Thenable, is_thenable

_logger = logging.getLogger(__name__)


# Outcome of a reaction call: either the values it returned, or the exception
# it raised.
_Success = namedtuple('_Success', ['values'])
_Failure = namedtuple('_Failure', ['error'])


def _invoke(reaction, values):
    try:
        returned = reaction(*values)
    except Exception as error:
        return _Failure(error)
    if isinstance(returned, tuple):
        return _Success(returned)
    return _Success((returned,))


def _pass_through(*values):
    return values


def _settler(method):
    """Reaction calling `method` and returning nothing."""
    def settle(*values):
        method(*values)
    return settle


class Deferred(Thenable):
    """The "creator" side of an asynchronous task.

    A Deferred is the "creator" side of an async task, whereas a Promise
    represents the asynchronous value from the "consumer" side. The code
    producing the value keeps the Deferred, settles it with ``resolve()`` or
    ``reject()``, and gives away ``self.promise``.

    When it's settled, the reactions registered with ``then()`` are handed
    over to the notification backend, who decides when to execute them.

    Deferreds are not thread-safe: calls to ``resolve()``, ``reject()`` and
    ``then()`` on the same instance must not be concurrent.

    Attributes:
        promise (Promise): the Promise associated to the Deferred.
        backend (NotificationBackend): backend used by this Deferred and all
            Deferreds chained from it.
    """

    PENDING = 'pending'
    RESOLVING = 'resolving'
    RESOLVED = 'resolved'
    REJECTING = 'rejecting'
    REJECTED = 'rejected'

    def __init__(self, backend=None):
        self.backend = backend or default_backend
        self._state = self.PENDING
        self._result = None
        self._callbacks = []
        self._errbacks = []
        self._promise = Promise(self)

    @property
    def promise(self):
        return self._promise

    def status(self):
        return self._state

    def result(self):
        """Values passed to resolve() or reject().

        Returns:
            tuple: the values; None if the Deferred is pending.
        """
        return self._result

    def is_pending(self):
        return self._state == self.PENDING

    def is_resolving(self):
        return self._state == self.RESOLVING

    def is_rejecting(self):
        return self._state == self.REJECTING

    def is_resolved(self):
        return self._state in (self.RESOLVING, self.RESOLVED)

    def is_rejected(self):
        return self._state in (self.REJECTING, self.REJECTED)

    def is_settled(self):
        return self._state != self.PENDING

    def resolve(self, *values):
        """Fulfill the Deferred and notify the success reactions.

        A Deferred is settled only once. If it's not pending anymore, the call
        is ignored.

        Args:
            *values: result of the operation, passed as arguments to each
                success reaction.
        Returns:
            Deferred: self
        """
        if self._state != self.PENDING:
            _logger.warning('Try to resolve %r already settled. New result '
                            'will be ignored: %r', self, values)
            return self
        self._settle(self.RESOLVING, self.RESOLVED, values)
        return self

    def reject(self, *values):
        """Reject the Deferred and notify the failure reactions.

        A Deferred is settled only once. If it's not pending anymore, the call
        is ignored.

        Args:
            *values: cause of the failure, usually a single exception. They
                are passed as arguments to each failure reaction.
        Returns:
            Deferred: self
        """
        if self._state != self.PENDING:
            _logger.warning('Try to reject %r already settled. New error '
                            'will be ignored: %r', self, values)
            return self
        self._settle(self.REJECTING, self.REJECTED, values)
        return self

    def then(self, on_success, on_failure):
        """Register reactions and create a new Promise depending on them.

        If the Deferred is resolved, `on_success` is called with the result
        values. If it's rejected, `on_failure` is called with the rejection
        values. In any case, the reaction defines the state of the returned
        Promise:
        - If the reaction raises an exception, it's rejected with it.
        - If it returns a Thenable, it follows the state and result of this
          Thenable, once settled.
        - Else, it's resolved with the returned value. A returned tuple is
          considered as several values.

        Note that a failure reaction returning normally resolves the new
        Promise: the error is considered handled.

        Reactions registered on a Deferred already settled are notified
        immediately, with the existing result.

        Args:
            on_success (callable)
            on_failure (callable)
        Returns:
            Promise: new Promise, chained to self.
        Raises:
            InvalidCallback: if one of the reactions is not callable.
        """
        if not callable(on_success):
            raise InvalidCallback('You must pass in a success callback')
        if not callable(on_failure):
            raise InvalidCallback('You must pass in an error callback')

        d = self.__class__(backend=self.backend)
        self._callbacks.append(self._wrap(d, on_success))
        self._errbacks.append(self._wrap(d, on_failure))

        if self.is_resolved():
            self._flush(self._callbacks)
        elif self.is_rejected():
            self._flush(self._errbacks)
        return d.promise

    def catch(self, on_failure):
        """Register a failure reaction only.

        Alias of ``self.then(pass_through, on_failure)``: if self is resolved,
        the new Promise is resolved with the same values.
        """
        return self.then(_pass_through, on_failure)

    def _settle(self, transient_state, final_state, values):
        self._result = values
        self._state = transient_state
        try:
            if final_state == self.RESOLVED:
                self._flush(self._callbacks)
            else:
                self._flush(self._errbacks)
        finally:
            self._state = final_state
        _logger.debug('%r %s', self, final_state)

    def _flush(self, queue):
        """Empty both queues and notify the reactions taken from `queue`.

        If the notification can't be handed over, the reactions are queued
        again, and will be notified at the next call to `then()`.
        """
        from_callbacks = queue is self._callbacks
        callbacks = list(queue)
        self._callbacks = []
        self._errbacks = []
        if not callbacks:
            return
        try:
            self._notify(callbacks, self._result)
        except Exception:
            if from_callbacks:
                self._callbacks = callbacks + self._callbacks
            else:
                self._errbacks = callbacks + self._errbacks
            raise

    def _notify(self, callbacks, result):
        """Hook deciding when the reactions are executed.

        Args:
            callbacks (list of callable): reactions, in registration order.
            result (tuple): values of the settlement.
        """
        self.backend.notify(callbacks, result)

    @staticmethod
    def _wrap(d, reaction):
        """Build the queued form of a reaction, who settles `d`."""

        def wrapper(*values):
            outcome = _invoke(reaction, values)
            if isinstance(outcome, _Failure):
                d.reject(outcome.error)
                return

            returned = outcome.values
            if len(returned) == 1 and is_thenable(returned[0]):
                # d follows the returned Thenable.
                returned[0].then(_settler(d.resolve), _settler(d.reject))
            else:
                d.resolve(*returned)

        return wrapper

    def __repr__(self):
        if self._state == self.PENDING:
            return '<%s %s>' % (self.__class__.__name__, self._state)
        return '<%s %s %r>' % (self.__class__.__name__, self._state,
                               self._result)
