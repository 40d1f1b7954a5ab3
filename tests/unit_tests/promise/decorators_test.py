# -*- coding: utf-8 -*-

from promises import Deferred, Promise, SynchronousBackend, wrap_promise


class TestDecorator(object):

    def test_wrap_sync_function(self):
        @wrap_promise
        def f(x):
            return x * 3

        p = f(30)
        assert isinstance(p, Promise)
        assert p.result() == (90,)

    def test_wrap_function_returning_tuple(self):
        @wrap_promise
        def f(x):
            return x, x + 1

        assert f(1).result() == (1, 2)

    def test_wrap_function_returning_promise(self):
        inner = Deferred()

        @wrap_promise
        def f(x):
            return inner.promise

        p = f(30)
        assert p is inner.promise

    def test_wrap_function_with_exception(self):
        class MyException(Exception):
            pass

        @wrap_promise
        def f(x):
            raise MyException()

        p = f(30)
        assert isinstance(p, Promise)
        assert p.is_rejected()
        assert isinstance(p.result()[0], MyException)

    def test_wrapped_function_keeps_its_name(self):
        @wrap_promise
        def compute():
            return 1

        assert compute.__name__ == 'compute'

    def test_wrap_with_backend(self):
        backend = SynchronousBackend()

        @wrap_promise(backend=backend)
        def f(x):
            return x + 1

        p = f(1)
        assert p._deferred.backend is backend
        assert p.result() == (2,)
        assert f.__name__ == 'f'
