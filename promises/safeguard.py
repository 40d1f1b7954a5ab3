# -*- coding: utf-8 -*-

import logging

_logger = logging.getLogger(__name__)


def safeguard(promise):
    """Catch all errors and log them with the most details possible.

    This function is aimed to protect the program from uncaught rejected
    Promise. If no error handler has been set, the default behavior is to do
    nothing, and thus, errors are silently ignored.
    Calling `safeguard()` after all chains are set will catch these errors,
    and log them as ERROR with the maximum of details possible.

    Args:
        promise (Thenable): the last promise of a chain.
    Returns:
        Thenable: the same promise.
    """
    def ignore(*_values):
        pass

    def guard(*values):
        if len(values) == 1 and isinstance(values[0], BaseException):
            error = values[0]
            _logger.error('[SAFEGUARD] %r', promise,
                          exc_info=(type(error), error, error.__traceback__))
        else:
            _logger.error('[SAFEGUARD] %r rejected with %r', promise, values)

    promise.then(ignore, guard)
    return promise
