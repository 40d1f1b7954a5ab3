#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging
import pytest

from promises.common import config

"""### TEST CASES ###
    ## load
    config file exist
    config file does not exist

    ##get
    key does not exist
    get default values
    get a bool value
    get a bool with invalid value
    get a dict
    get a dict with invalid value
    get a string value

    ##set
    set a not existing key
    set a dict value
    set without existing file
    set with existing file
"""


@pytest.fixture
def config_path(tmpdir):
    path = str(tmpdir.join('promises.ini'))
    yield path
    config.reset()


class TestConfigLoad(object):

    def test_loadWithoutExistingFile(self, config_path, caplog):
        with caplog.at_level(logging.WARNING,
                             logger='promises.common.config'):
            config.load(config_path)
        assert 'Unable to load config file' in caplog.text

    def test_loadWithExistingFile(self, config_path, caplog):
        with open(config_path, 'w') as config_file:
            config_file.write('[config]\nbackend = executor\n')

        with caplog.at_level(logging.WARNING,
                             logger='promises.common.config'):
            config.load(config_path)
        assert not caplog.records
        assert config.get('backend') == 'executor'


class TestConfigGet(object):

    def test_keyDoesNotExist(self, config_path):
        config.load(config_path)
        with pytest.raises(KeyError):
            config.get('plop')

    def test_defaultValues(self, config_path):
        config.load(config_path)
        assert config.get('backend') == 'sync'
        assert config.get('debug_mode') is False
        assert config.get('log_levels') == {}

    def test_getABoolValue(self, config_path):
        config.load(config_path)
        config.set('debug_mode', True)
        assert config.get('debug_mode') is True

        config.set('debug_mode', 'False')
        assert config.get('debug_mode') is False

    def test_getABoolWithInvalidValue(self, config_path):
        config.load(config_path)
        config.set('debug_mode', 'plop')
        with pytest.raises(ValueError):
            config.get('debug_mode')

    def test_getADictValue(self, config_path):
        config.load(config_path)
        config.set('log_levels', 'aa=bb;cc = dd')
        value = config.get('log_levels')
        assert value == {'aa': 'bb', 'cc': 'dd'}

    def test_getADictWithInvalidValue(self, config_path, caplog):
        config.load(config_path)
        config.set('log_levels', 'plop;toto=tata')

        with caplog.at_level(logging.WARNING,
                             logger='promises.common.config'):
            value = config.get('log_levels')
        assert value == {'toto': 'tata'}
        assert 'Unable to parse pair' in caplog.text

    def test_getAStringValue(self, config_path):
        config.load(config_path)
        config.set('backend', 42)
        assert config.get('backend') == '42'


class TestConfigSet(object):

    def test_keyDoesNotExist(self, config_path):
        config.load(config_path)
        with pytest.raises(KeyError):
            config.set('plop', 42)

    def test_setADict(self, config_path):
        config.load(config_path)
        config.set('log_levels', {'promises': 'debug', 'asyncio': 'info'})
        assert config.get('log_levels') == {'promises': 'debug',
                                            'asyncio': 'info'}

    def test_setWritesTheFile(self, config_path):
        config.load(config_path)
        config.set('backend', 'asyncio')
        config.set('debug_mode', True)

        config.reset()
        assert config.get('backend') == 'sync'

        config.load(config_path)
        assert config.get('backend') == 'asyncio'
        assert config.get('debug_mode') is True

    def test_setInUnwritableFile(self, tmpdir, caplog):
        config.load(str(tmpdir.join('missing_dir', 'promises.ini')))
        try:
            with caplog.at_level(logging.WARNING,
                                 logger='promises.common.config'):
                config.set('backend', 'asyncio')
            assert 'Unable to write in the config file' in caplog.text
            assert config.get('backend') == 'asyncio'
        finally:
            config.reset()
