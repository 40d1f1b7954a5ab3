# -*- coding: utf-8 -*-

from .__version__ import __version__
from .backends import AsyncioBackend, ExecutorBackend, get_backend, \
    NotificationBackend, SynchronousBackend
from .collect import collect, when
from .decorators import wrap_promise
from .deferred import Deferred
from .errors import InvalidCallback, InvalidDeferredReference, PromiseError, \
    RejectedError, UnknownBackend
from .factory import DeferredFactory
from .promise import Promise
from .reduce_coroutine import reduce_coroutine
from .safeguard import safeguard
from .thread_pool import ThreadPoolExecutor
from .util import is_thenable, Thenable

__all__ = [
    '__version__', 'AsyncioBackend', 'collect', 'Deferred', 'DeferredFactory',
    'ExecutorBackend', 'get_backend', 'InvalidCallback',
    'InvalidDeferredReference', 'is_thenable', 'NotificationBackend',
    'Promise', 'PromiseError', 'reduce_coroutine', 'RejectedError',
    'safeguard', 'SynchronousBackend', 'Thenable', 'ThreadPoolExecutor',
    'UnknownBackend', 'when', 'wrap_promise'
]
