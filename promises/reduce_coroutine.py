# -*- coding: utf-8 -*-

from functools import wraps

from .deferred import Deferred
from .errors import RejectedError
from .safeguard import safeguard as safeguard_promise
from .util import is_thenable


def _values_to_send(values):
    if not values:
        return None
    if len(values) == 1:
        return values[0]
    return values


def _values_to_throw(values):
    if len(values) == 1 and isinstance(values[0], BaseException):
        return values[0]
    return RejectedError(*values)


def reduce_coroutine(safeguard=False, backend=None):
    """Decorator who converts a coroutine of promises into a single promise.

    The greatest interest is the ability to write a function in an
    synchronous-like style, using many asynchronous Promises.
    Whatever is the number of Promises or async calls used, the result will
    always be an unique Promise wrapping the whole process.

    Each Thenable yielded is waited. Its result is sent back to the generator
    (a single value as is, several values as a tuple). If it's rejected, the
    error is raised inside the generator, at the `yield` statement; a
    rejection who is not an exception is raised as a `RejectedError`.
    The first non-Thenable value yielded (or the value returned by the
    generator) is the result of the Promise. If the generator ends after a
    Thenable, the result of this last Thenable is used.

    Args:
        safeguard (boolean): if true, use `safeguard()` on the resulting
            promise.
        backend (NotificationBackend, optional): backend of the resulting
            promise.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            """
            Args:
                *args
                **kwargs
            Returns:
                Promise<*>
            """
            df = Deferred(backend=backend)
            if safeguard:
                safeguard_promise(df.promise)

            try:
                # Create generator; Initialization phase
                gen = func(*args, **kwargs)
            except Exception as error:
                df.reject(error)
                return df.promise

            def _call_next_or_set_result(value):
                if is_thenable(value):
                    value.then(iter_next, iter_error)
                else:
                    gen.close()
                    df.resolve(value)

            def _finish(stop, last_values):
                if stop.value is not None:
                    df.resolve(stop.value)
                else:
                    df.resolve(*last_values)

            def iter_next(*values):
                try:
                    next_value = gen.send(_values_to_send(values))
                except StopIteration as stop:
                    _finish(stop, values)
                    return
                except Exception as error:
                    df.reject(error)
                    return
                _call_next_or_set_result(next_value)

            def iter_error(*values):
                error = _values_to_throw(values)
                try:
                    next_value = gen.throw(error)
                except StopIteration as stop:
                    if stop.value is not None:
                        df.resolve(stop.value)
                    else:
                        df.reject(*values)
                    return
                except Exception as raised:
                    if raised is error:
                        # Not caught by the generator.
                        df.reject(*values)
                    else:
                        df.reject(raised)
                    return
                _call_next_or_set_result(next_value)

            # Start and resolve loop.
            try:
                f = next(gen)
            except StopIteration as stop:
                df.resolve(stop.value)
                return df.promise
            except Exception as error:
                df.reject(error)
                return df.promise
            _call_next_or_set_result(f)

            return df.promise

        return wrapper
    return decorator
