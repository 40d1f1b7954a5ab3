# -*- coding: utf-8 -*-

import logging

from .backends import default_backend, get_backend
from .collect import collect
from .common import config
from .deferred import Deferred

_logger = logging.getLogger(__name__)


class DeferredFactory(object):
    """Creates Deferreds bound to a notification backend.

    Typically an application uses a single event loop, so all its Deferreds
    should use the same backend. The application creates one factory and
    passes it to the code producing promises, instead of changing a global
    default.

    Example:

        >>> factory = DeferredFactory(AsyncioBackend(loop))
        >>> d = factory.deferred()
        >>> p = factory.collect(d.promise, other_promise)
    """

    def __init__(self, backend=None, deferred_class=Deferred):
        """
        Args:
            backend (NotificationBackend, optional): default to the
                synchronous backend.
            deferred_class (type, optional): Deferred subclass to instantiate.
        """
        self.backend = backend or default_backend
        self.deferred_class = deferred_class

    @classmethod
    def from_config(cls):
        """Create a factory using the backend named in the config file.

        The "asyncio" backend is bound to the running loop: in this case, the
        factory must be created from a coroutine or a callback of the loop.
        """
        name = config.get('backend')
        _logger.debug('Use notification backend "%s"', name)
        return cls(get_backend(name))

    def deferred(self):
        """Create a new pending Deferred."""
        return self.deferred_class(backend=self.backend)

    def resolved(self, *values):
        """Create a Promise already resolved with the values."""
        return self.deferred().resolve(*values).promise

    def rejected(self, *values):
        """Create a Promise already rejected with the values."""
        return self.deferred().reject(*values).promise

    def collect(self, *promises):
        """Aggregate promises; see ``promises.collect()``."""
        return collect(*promises, backend=self.backend,
                       deferred_class=self.deferred_class)

    def __repr__(self):
        return 'DeferredFactory(%r)' % self.backend.__class__.__name__
