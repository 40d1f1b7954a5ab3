# -*- coding: utf-8 -*-

import abc


class Thenable(abc.ABC):
    """Capability of an object who can be chained, like a Promise.

    The reaction wrapper uses this interface to differentiate a "chainable"
    returned value from a direct result. Any promise-like type can take part
    by subclassing it, or by being registered with ``Thenable.register()``.
    """

    @abc.abstractmethod
    def then(self, on_success, on_failure):
        """Register two reactions and return a new Thenable.

        Args:
            on_success (callable): receives the resolution values as
                positional arguments.
            on_failure (callable): receives the rejection values as
                positional arguments.
        """


def is_thenable(value):
    """Check if an object can be chained, like a Promise, or is a "result".

    Returns:
        boolean: True if the value implements the Thenable interface.
    """
    return isinstance(value, Thenable)
