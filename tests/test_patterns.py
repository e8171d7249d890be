"""Tests for PIN pattern detection and the PIN policy."""

import pytest

from pin_keeper.exceptions import PinLengthError, ValidationError, WeakPinError
from pin_keeper.policy import PinPolicy, has_too_many_repeats, is_digit_string, is_sequential


class TestIsSequential:
    """Tests for is_sequential."""

    @pytest.mark.parametrize("length", [3, 4, 6])
    def test_ascending_runs(self, length: int) -> None:
        for first in range(0, 10 - length + 1):
            pin = "".join(str(first + i) for i in range(length))
            assert is_sequential(pin), pin

    @pytest.mark.parametrize("length", [3, 4, 6])
    def test_descending_runs(self, length: int) -> None:
        for first in range(length - 1, 10):
            pin = "".join(str(first - i) for i in range(length))
            assert is_sequential(pin), pin

    @pytest.mark.parametrize("pin", ["1235", "1243", "9875", "1357", "0987", "4829", "1212"])
    def test_non_sequential(self, pin: str) -> None:
        assert not is_sequential(pin)

    def test_no_wraparound(self) -> None:
        """9 -> 0 is not a +1 step."""
        assert not is_sequential("7890")
        assert not is_sequential("2109")

    def test_short_inputs_trivially_sequential(self) -> None:
        assert is_sequential("5")
        assert is_sequential("56")
        assert is_sequential("65")
        assert not is_sequential("58")


class TestHasTooManyRepeats:
    """Tests for has_too_many_repeats."""

    @pytest.mark.parametrize("pin", ["0000", "1112", "2111", "4777", "123444", "900012"])
    def test_run_of_three(self, pin: str) -> None:
        assert has_too_many_repeats(pin)

    @pytest.mark.parametrize("pin", ["11", "5", "999999"])
    def test_all_identical(self, pin: str) -> None:
        assert has_too_many_repeats(pin)

    @pytest.mark.parametrize("pin", ["1122", "1212", "4829", "110011", "12"])
    def test_acceptable(self, pin: str) -> None:
        assert not has_too_many_repeats(pin)


class TestIsDigitString:
    def test_digits(self) -> None:
        assert is_digit_string("0123")

    @pytest.mark.parametrize("value", ["", "12a4", " 123", "١٢٣٤", "²³"])
    def test_rejects_non_ascii_digits(self, value: str) -> None:
        assert not is_digit_string(value)


class TestPinPolicy:
    """Tests for PinPolicy."""

    def test_check_length(self) -> None:
        policy = PinPolicy()
        policy.check_length(4)
        policy.check_length(6)
        with pytest.raises(PinLengthError):
            policy.check_length(5)

    def test_generated_pin_rejects_banned(self) -> None:
        policy = PinPolicy()
        assert not policy.is_acceptable_generated("2580")
        assert not policy.is_acceptable_generated("1004")
        assert policy.is_acceptable_generated("4829")

    def test_custom_banned_set(self) -> None:
        policy = PinPolicy(banned_pins={"4829"})
        assert not policy.is_acceptable_generated("4829")
        assert policy.is_acceptable_generated("2580")

    def test_check_new_pin_ignores_banned_set(self) -> None:
        PinPolicy().check_new_pin("2580", 4)

    def test_check_new_pin_wrong_length(self) -> None:
        with pytest.raises(PinLengthError):
            PinPolicy().check_new_pin("48291", 4)

    def test_check_new_pin_non_digit(self) -> None:
        with pytest.raises(ValidationError):
            PinPolicy().check_new_pin("48a9", 4)

    @pytest.mark.parametrize("pin", ["3456", "6543", "2227", "8888"])
    def test_check_new_pin_weak(self, pin: str) -> None:
        with pytest.raises(WeakPinError):
            PinPolicy().check_new_pin(pin, 4)
