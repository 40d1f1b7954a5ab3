#!/usr/bin/env python
# -*- coding: utf-8 -*-

import datetime
import io
import logging
import sys

from promises.common import config
from promises.common.log import ColoredFormatter, Context, reset, \
    set_debug_mode, set_logs_level

colorFormater = ColoredFormatter()


class TestLogFormating(object):

    def test_colorize(self):
        for color in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL',
                      'NAME', 'DATE', 'EXCEPTION_NAME', 'EXCEPTION_STR'):
            assert colorFormater._colorize("plop", color) == \
                ColoredFormatter._colors[color] + "plop" + \
                ColoredFormatter._colors['RESET']

    def test_colorize_unknown_color(self):
        assert colorFormater._colorize("plop", "PLOP") == \
            "plop" + ColoredFormatter._colors['RESET']

    def test_formatTime(self):
        record = logging.LogRecord(
            "record", logging.INFO, "/ici/", 123, "test", None, None)
        formated_record = colorFormater.formatTime(record, "%Y.%m.%d")
        expected_output = "\033[30;1m" + \
            datetime.date.today().strftime('%Y.%m.%d') + \
            ColoredFormatter._colors['RESET']

        assert formated_record == expected_output

    def test_formatException(self):
        try:
            raise Exception()
        except Exception:
            assert ColoredFormatter._colors['EXCEPTION_NAME'] + \
                "Exception" + ColoredFormatter._colors['RESET'] + \
                ":" + ColoredFormatter._colors['EXCEPTION_STR'] + \
                ColoredFormatter._colors['RESET'] in \
                colorFormater.formatException(sys.exc_info())

    def test_format_keeps_record(self):
        """Colors must not leak in the other handlers."""
        record = logging.LogRecord(
            "promises", logging.INFO, "/ici/", 123, "test", None, None)
        formatter = ColoredFormatter(
            fmt='%(name)s %(levelname)s %(message)s')
        colored = formatter.format(record)
        assert ColoredFormatter._colors['NAME'] in colored
        assert record.name == 'promises'
        assert record.levelname == 'INFO'


class TestLogInit(object):

    def teardown_method(self, method):
        logging.getLogger('promises').setLevel(logging.NOTSET)
        logging.getLogger('promises.deferred').setLevel(logging.NOTSET)
        config.reset()

    def test_context_install_handlers(self):
        logger = logging.getLogger()
        nb_handlers = len(logger.handlers)
        stream = io.StringIO()

        with Context(stream=stream):
            assert len(logger.handlers) == nb_handlers + 1
            logging.getLogger('promises.test').warning('Message in stream')

        assert len(logger.handlers) == nb_handlers
        assert 'Message in stream' in stream.getvalue()
        assert 'promises.test' in stream.getvalue()

    def test_context_with_file(self, tmpdir, monkeypatch):
        monkeypatch.setattr('promises.common.path.get_log_dir',
                            lambda: str(tmpdir))
        logger = logging.getLogger()
        nb_handlers = len(logger.handlers)

        with Context(filename='promises.log', stream=io.StringIO()):
            assert len(logger.handlers) == nb_handlers + 2
            logging.getLogger('promises.test').warning('Message in file')

        assert 'Message in file' in tmpdir.join('promises.log').read()

    def test_context_applies_config(self, tmpdir):
        config_file = tmpdir.join('promises.ini')
        config_file.write('[config]\ndebug_mode = true\n'
                          'log_levels = promises.deferred=error\n')
        config.load(str(config_file))

        with Context(stream=io.StringIO()):
            assert logging.getLogger('promises').getEffectiveLevel() == \
                logging.DEBUG
            assert logging.getLogger('promises.deferred').level == \
                logging.ERROR

    def test_setDebugTrue(self):
        set_debug_mode(True)
        assert logging.getLogger("promises").getEffectiveLevel() == \
            logging.DEBUG

    def test_setDebugFalse(self):
        set_debug_mode(False)
        assert logging.getLogger("promises").getEffectiveLevel() == \
            logging.INFO

    def test_setLogsLevel(self):
        set_logs_level({'promises.deferred': 'warning'})
        assert logging.getLogger('promises.deferred').level == \
            logging.WARNING

    def test_setInvalidLogsLevel(self, caplog):
        with caplog.at_level(logging.WARNING, logger='promises.common.log'):
            set_logs_level({'promises.deferred': 'plop'})
        assert 'Invalid log level' in caplog.text

    def test_reset(self):
        logger = logging.getLogger()
        handlers_backup = list(logger.handlers)
        filter_ = logging.Filter('promises')
        try:
            logger.addHandler(logging.NullHandler())
            logger.addFilter(filter_)

            reset()

            assert logger.handlers == []
            assert logger.filters == []
        finally:
            logger.removeFilter(filter_)
            for h in handlers_backup:
                logger.addHandler(h)
