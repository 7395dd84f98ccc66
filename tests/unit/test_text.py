"""
Тесты для Textual Conversion

Проверяет:
1. Разбор корректных строк (знак, ведущие нули)
2. Отклонение некорректного ввода через ParseError
3. Формат to_string
4. Round-trip from_integer → to_string → from_string
"""

import pytest

from bignum import ParseError, from_integer, from_string, to_string


class TestFromString:
    """Тесты для from_string"""

    def test_plain(self) -> None:
        assert to_string(from_string("12345")) == "12345"

    def test_little_endian_storage(self) -> None:
        assert from_string("12345").digits == (5, 4, 3, 2, 1)

    def test_explicit_plus(self) -> None:
        value = from_string("+77")
        assert value.sign is False
        assert to_string(value) == "77"

    def test_negative(self) -> None:
        value = from_string("-120")
        assert value.sign is True
        assert to_string(value) == "-120"

    def test_leading_zeros_trimmed(self) -> None:
        value = from_string("000450")
        assert value.length == 3
        assert to_string(value) == "450"

    @pytest.mark.parametrize("text", ["0", "-0", "+0", "0000"])
    def test_zero_forms(self, text: str) -> None:
        value = from_string(text)
        assert value.is_zero
        assert value.sign is False
        assert to_string(value) == "0"

    def test_long_input(self) -> None:
        text = "9" * 500
        assert to_string(from_string(text)) == text


class TestParseErrors:
    """Некорректный ввод → ParseError"""

    def test_letters(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            from_string("abc")
        assert exc_info.value.position == 0

    def test_position_of_first_bad_character(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            from_string("-12x4")
        assert exc_info.value.position == 3
        assert exc_info.value.text == "-12x4"

    @pytest.mark.parametrize("text", ["", "-", "+"])
    def test_no_digits(self, text: str) -> None:
        with pytest.raises(ParseError, match="at least one decimal digit"):
            from_string(text)

    @pytest.mark.parametrize("text", [" 12", "12 ", "1_000", "--1", "+-1", "1.0", "١٢"])
    def test_rejected_forms(self, text: str) -> None:
        with pytest.raises(ParseError):
            from_string(text)

    def test_parse_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            from_string("12a")

    def test_non_str_rejected(self) -> None:
        with pytest.raises(TypeError):
            from_string(12)  # type: ignore[arg-type]


class TestToString:
    """Тесты для to_string"""

    def test_negative_integer(self) -> None:
        assert to_string(from_integer(-7)) == "-7"

    def test_zero(self) -> None:
        assert to_string(from_integer(0)) == "0"


class TestRoundTrip:
    """Инвариант: from_string(to_string(from_integer(n))) == from_integer(n)"""

    @pytest.mark.parametrize(
        "n",
        [0, 1, -1, 9, 10, -10, 12345, -987654321, 10**30, -(10**30) + 1, 2**127],
    )
    def test_round_trip(self, n: int) -> None:
        original = from_integer(n)
        restored = from_string(to_string(original))
        assert restored == original
        assert int(restored) == n
