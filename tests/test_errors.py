"""Tests for wrap(), GenericError/GenericFailure and UnexpectedShape."""

import msgspec
import pytest
from klaw_err import (
    GenericError,
    GenericFailure,
    Shape,
    UnexpectedShape,
    UnknownOrigin,
    err,
    map_err,
    message,
    register_formatter,
    wrap,
)


class CustomError(Exception):
    """Application error with its own message."""

    def __init__(self, reason=None):
        self.reason = reason
        super().__init__(f'custom: {reason!r}')


class AppError(GenericError):
    """GenericError subclass used as an application base error."""


class TestWrap:
    """Tests for wrap()."""

    def test_wrap_class(self):
        """wrap() instantiates an exception class."""
        exc = wrap(ValueError)
        assert type(exc) is ValueError

    def test_wrap_with_args(self):
        exc = wrap(ValueError, 'bad input')
        assert str(exc) == 'bad input'

    def test_wrap_with_fields(self):
        """Fields are set as attributes on non-generic exceptions."""
        exc = wrap(KeyError, key='id')
        assert isinstance(exc, KeyError)
        assert exc.key == 'id'

    def test_wrap_generic_by_default(self):
        """Without a class, wrap() builds a GenericError."""
        exc = wrap(reason='app_error')
        assert type(exc) is GenericError
        assert exc.reason == 'app_error'
        assert exc.origin is None

    def test_wrap_generic_class(self):
        exc = wrap(GenericError, reason='app_error')
        assert type(exc) is GenericError
        assert exc.reason == 'app_error'

    def test_wrap_generic_subclass_keywords(self):
        exc = wrap(AppError, reason='boom', details={'id': 1})
        assert type(exc) is AppError
        assert exc.details == {'id': 1}

    def test_wrap_generic_rejects_unknown_fields(self):
        """GenericError constructors are strict: unknown fields are not dropped."""
        with pytest.raises(TypeError, match='unknown'):
            wrap(GenericError, reason='x', unknown=1)

    def test_wrap_custom(self):
        exc = wrap(CustomError, 'boom')
        assert exc.reason == 'boom'

    def test_wrap_result_can_be_raised(self):
        with pytest.raises(GenericError):
            raise wrap(reason='boom')
        with pytest.raises(CustomError):
            raise wrap(CustomError, 'boom')

    @pytest.mark.parametrize('exception', [int, 'ValueError', ValueError('already built')])
    def test_wrap_rejects_non_exception_classes(self, exception):
        with pytest.raises(TypeError, match='expects an exception class'):
            wrap(exception)


class TestGenericError:
    """Tests for GenericError and GenericFailure."""

    def test_default_message(self):
        """Without an origin the message is generic."""
        assert str(GenericError('app_error')) == "generic error: 'app_error'"

    def test_none_reason(self):
        assert str(GenericError()) == 'generic error: None'

    def test_origin_message(self):
        """With an origin, str() uses the origin's formatter."""
        register_formatter('auth', lambda reason: f'Not allowed: {reason}')
        assert str(GenericError('insufficient_permissions', origin='auth')) == 'Not allowed: insufficient_permissions'

    def test_unknown_origin_falls_back_to_generic_message(self):
        """str() never raises, even when no formatter matches the origin."""
        assert str(GenericError('card_declined', origin='billing')) == "generic error: 'card_declined'"

    def test_failing_formatter_falls_back_to_generic_message(self):
        register_formatter('billing', lambda reason: reason + 1)
        assert str(GenericError('card_declined', origin='billing')) == "generic error: 'card_declined'"

    def test_repr(self):
        assert repr(GenericError('x', origin='db')) == "GenericError(reason='x', origin='db')"

    def test_to_struct_round_trip(self):
        exc = GenericError('timeout', origin='db', details={'after': 5})
        failure = exc.to_struct()
        assert failure == GenericFailure('timeout', 'db', {'after': 5})
        back = failure.to_exception()
        assert (back.reason, back.origin, back.details) == ('timeout', 'db', {'after': 5})

    def test_struct_is_frozen(self):
        with pytest.raises(AttributeError):
            GenericFailure('x').reason = 'y'  # type: ignore[misc]

    def test_struct_as_failure_reason(self):
        """The struct variant travels inside failure tuples and encodes cleanly."""
        value = err(GenericFailure('timeout', 'db'))
        encoded = msgspec.json.encode(value)
        assert msgspec.json.decode(encoded) == ['error', {'reason': 'timeout', 'origin': 'db', 'details': None}]

    def test_map_err_to_exception(self):
        value = map_err(err(GenericFailure('timeout')), GenericFailure.to_exception)
        assert isinstance(value[1], GenericError)


class TestUnexpectedShape:
    """Tests for UnexpectedShape construction."""

    def test_attributes(self):
        exc = UnexpectedShape('ctx', expected=Shape.SUCCESS, actual=Shape.ABSENT)
        assert exc.descriptor == 'ctx'
        assert exc.expected is Shape.SUCCESS
        assert exc.actual is Shape.ABSENT
        assert str(exc) == 'expected success, got absent: ctx'

    def test_non_string_descriptor_is_repr(self):
        exc = UnexpectedShape({'id': 1}, expected=Shape.FAILURE, actual=Shape.OPAQUE)
        assert str(exc) == "expected failure, got opaque: {'id': 1}"

    def test_exception_descriptor_uses_message(self):
        register_formatter('billing', lambda reason: f'billing failed: {reason}')
        descriptor = GenericError('card_declined', origin='billing')
        exc = UnexpectedShape(descriptor, expected=Shape.SUCCESS, actual=Shape.FAILURE)
        assert str(exc) == 'expected success, got failure: billing failed: card_declined'

    def test_exception_descriptor_with_unknown_origin_is_repr(self):
        descriptor = GenericError('card_declined', origin='billing')
        exc = UnexpectedShape(descriptor, expected=Shape.SUCCESS, actual=Shape.FAILURE)
        assert str(exc) == (
            "expected success, got failure: GenericError(reason='card_declined', origin='billing')"
        )

    def test_unknown_origin_is_lookup_error(self):
        assert issubclass(UnknownOrigin, LookupError)
        with pytest.raises(UnknownOrigin):
            message(GenericError('x', origin='nowhere'))
