# -*- coding: utf-8 -*-

from concurrent.futures import ThreadPoolExecutor as Executor

from .deferred import Deferred


class ThreadPoolExecutor(object):
    """Execute callables asynchronously on demand, in another threads.

    The Deferred of each task is settled from the worker thread who ran it.
    With the default (synchronous) backend, the reactions are executed in
    this thread too. Pass an `AsyncioBackend` bound to a loop, or an
    `ExecutorBackend`, to run them elsewhere.
    """

    def __init__(self, max_workers, backend=None):
        """Initialize the thread pool

        Args:
            max_workers: The maximum number of threads that can be used to
                execute the given calls.
            backend (NotificationBackend, optional): backend of the
                Deferreds created by ``submit()``.
        """
        self._executor = Executor(max_workers)
        self._backend = backend

    def submit(self, callback, *args, **kwargs):
        """Schedule the callable to be executed and return a Promise.

        Args:
            callback (callable): callback who will run in another thread.
            *args: argument passed to callback.
            **kwargs: keywords arguments passed to callback.
        Returns:
            Promise: Promise who resolve after the callback has been executed.
                It's resolved with the value returned by the callback.
                If the callback raise an exception, the promise is rejected
                with this exception.
        """
        df = Deferred(backend=self._backend)

        def on_future_done(f):
            error = f.exception()
            if error is not None:
                df.reject(error)
            else:
                df.resolve(f.result())

        f = self._executor.submit(callback, *args, **kwargs)
        f.add_done_callback(on_future_done)

        return df.promise

    def shutdown(self, wait=True):
        self._executor.shutdown(wait=wait)
