"""Error class hierarchy tests."""

import pytest

import timespan
from timespan._errors import ERR_MSG_OUT_OF_RANGE, OutOfRangeError, TimeSpanError


class TestTimeSpanErrorBase:
    def test_str_returns_user_message(self):
        err = TimeSpanError("user msg", "internal detail")
        assert str(err) == "user msg"

    def test_internal_returns_details(self):
        err = TimeSpanError("user msg", "internal detail")
        assert err.internal() == "internal detail"

    def test_internal_defaults_to_user_message(self):
        err = TimeSpanError("same message")
        assert err.internal() == "same message"

    def test_wrapped_exception(self):
        cause = ZeroDivisionError("root cause")
        err = TimeSpanError("user msg", wrapped=cause)
        assert err.wrapped is cause

    def test_is_exception(self):
        assert isinstance(TimeSpanError("test"), Exception)


class TestOutOfRangeError:
    def test_is_subclass_of_base(self):
        assert issubclass(OutOfRangeError, TimeSpanError)

    def test_is_catchable_as_base(self):
        with pytest.raises(TimeSpanError):
            raise OutOfRangeError("test")

    def test_exported(self):
        assert timespan.OutOfRangeError is OutOfRangeError
        assert timespan.TimeSpanError is TimeSpanError

    def test_raised_error_messages(self):
        with pytest.raises(OutOfRangeError) as exc_info:
            timespan.TimeSpan.from_milliseconds(timespan.MAX_SAFE_INTEGER + 1)
        err = exc_info.value
        assert err.user_message == ERR_MSG_OUT_OF_RANGE
        assert str(timespan.MAX_SAFE_INTEGER + 1) in err.internal()
        assert err.wrapped is None
