# -*- coding: utf-8 -*-

"""Notification backends.

A backend decides *when* the reactions queued on a Deferred are executed,
once it's settled. The Deferred hands over the list of callbacks and the
result; the backend must call every callback exactly once with the result
values, in the order of the list.

The default backend calls them immediately, in the flow of ``resolve()`` or
``reject()``. The others postpone the calls to a host scheduler: the next
iteration of an asyncio loop, or a task of an executor.
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
import logging

from .errors import UnknownBackend

_logger = logging.getLogger(__name__)


class NotificationBackend(object):
    """Base class of the notification backends."""

    name = None

    def notify(self, callbacks, result):
        """Execute the callbacks of a settlement event.

        Args:
            callbacks (list of callable): reactions to execute, in order.
            result (tuple): values passed to each callback.
        """
        raise NotImplementedError()

    @staticmethod
    def _run_callbacks(callbacks, result):
        for callback in callbacks:
            try:
                callback(*result)
            except Exception:
                _logger.exception('Promise callback raise an exception!')


class SynchronousBackend(NotificationBackend):
    """Executes the callbacks immediately, before resolve() returns."""

    name = 'sync'

    def notify(self, callbacks, result):
        self._run_callbacks(callbacks, result)


class AsyncioBackend(NotificationBackend):
    """Postpones the callbacks to the next iteration of an asyncio loop.

    Each settlement event is a single ``call_soon_threadsafe()``, so its
    callbacks are executed together and in order. The loop is bound when the
    backend is created, so the Deferreds can be settled from anywhere,
    including another thread.
    """

    name = 'asyncio'

    def __init__(self, loop=None):
        """
        Args:
            loop (asyncio.AbstractEventLoop, optional): loop receiving the
                callbacks. By default, the running loop is used.
        Raises:
            RuntimeError: if no loop is given and no loop is running.
        """
        if loop is None:
            try:
                loop = asyncio.get_running_loop()
            except RuntimeError:
                raise RuntimeError('AsyncioBackend needs an event loop: give '
                                   'one, or create the backend from a '
                                   'running loop.')
        self._loop = loop

    @property
    def loop(self):
        return self._loop

    def notify(self, callbacks, result):
        self._loop.call_soon_threadsafe(self._run_callbacks, list(callbacks),
                                        result)


class ExecutorBackend(NotificationBackend):
    """Hands the callbacks over to a ``concurrent.futures`` executor.

    Each settlement event is one task submitted to the executor. The default
    executor has a single worker, so that events are executed in the order
    they were submitted.

    Note that the Deferreds themselves are not thread-safe: the reactions
    executed in the worker must be the only ones to settle the Deferreds they
    touch.
    """

    name = 'executor'

    def __init__(self, executor=None):
        """
        Args:
            executor (concurrent.futures.Executor, optional): if not set, a
                private ThreadPoolExecutor of one worker is created on first
                use.
        """
        self._executor = executor

    @property
    def executor(self):
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=1, thread_name_prefix='promises-notify')
        return self._executor

    def notify(self, callbacks, result):
        self.executor.submit(self._run_callbacks, list(callbacks), result)

    def shutdown(self, wait=True):
        """Stop the executor, after the pending notifications by default."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)


_backends = {
    SynchronousBackend.name: SynchronousBackend,
    AsyncioBackend.name: AsyncioBackend,
    ExecutorBackend.name: ExecutorBackend,
}


def get_backend(name, *args, **kwargs):
    """Create a new backend from its name.

    Args:
        name (str): one of 'sync', 'asyncio' or 'executor'. Case insensitive.
        *args, **kwargs: passed to the backend constructor.
    Returns:
        NotificationBackend
    Raises:
        UnknownBackend: if there is no backend of this name.
    """
    try:
        backend_class = _backends[name.lower()]
    except (KeyError, AttributeError):
        raise UnknownBackend('Unknown notification backend: %r' % (name,))
    return backend_class(*args, **kwargs)


default_backend = SynchronousBackend()
