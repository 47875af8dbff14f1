import logging

import pytest

from ideogram.util import DEVNULL, Log, cast_boolean


class TestLog:
    def test_default_level(self, caplog):
        log = Log()
        with caplog.at_level(logging.INFO, logger='ideogram'):
            log('drew', 3, 'markers')
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.INFO
        assert caplog.records[0].getMessage().endswith('drew 3 markers')

    def test_level_override(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='ideogram'):
            Log()('details', level=logging.DEBUG)
        assert caplog.records[0].levelno == logging.DEBUG

    def test_time_stamp(self, caplog):
        with caplog.at_level(logging.INFO, logger='ideogram'):
            Log()('stamped', time_stamp=True)
        assert caplog.records[0].getMessage().startswith('[')

    def test_devnull_is_silent(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='ideogram'):
            DEVNULL('nothing to see')
        assert not caplog.records


class TestCast:
    @pytest.mark.parametrize('value', ['t', 'True', '1', 'yes', 'Y', '+', True])
    def test_true(self, value):
        assert cast_boolean(value) is True

    @pytest.mark.parametrize('value', ['f', 'FALSE', '0', 'no', 'n', '-', False])
    def test_false(self, value):
        assert cast_boolean(value) is False

    def test_bad_boolean(self):
        with pytest.raises(TypeError):
            cast_boolean('maybe')
