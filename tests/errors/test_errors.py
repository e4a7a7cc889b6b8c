"""Tests for busy indicator error classes."""

import pytest

from busy_indicator.errors import BusyIndicatorError, UnregisteredKeyError


class TestUnregisteredKeyError:
    """Test UnregisteredKeyError constructor and behavior."""

    def test_stores_key_and_message(self) -> None:
        err = UnregisteredKeyError("upload", 'Key "upload" is not registered.')
        assert err.key == "upload"
        assert err.message == 'Key "upload" is not registered.'
        assert str(err) == 'Key "upload" is not registered.'

    def test_is_busy_indicator_error(self) -> None:
        with pytest.raises(BusyIndicatorError, match="not registered"):
            raise UnregisteredKeyError("upload", 'Key "upload" is not registered.')

    def test_is_not_a_key_error(self) -> None:
        assert not issubclass(UnregisteredKeyError, KeyError)
