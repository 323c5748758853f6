import pytest

from rcli.utils.genpass import DIGITS, LOWER, SYMBOLS, UPPER, generate_password
from rcli.utils.validators import ValidationError


def test_default_password_covers_every_class():
    password = generate_password(32)

    assert len(password) == 32
    assert any(c in UPPER for c in password)
    assert any(c in LOWER for c in password)
    assert any(c in DIGITS for c in password)
    assert any(c in SYMBOLS for c in password)


def test_excluded_classes_are_left_out():
    password = generate_password(64, exclude_upper=True, exclude_symbols=True)

    assert len(password) == 64
    assert all(c in LOWER + DIGITS for c in password)
    assert any(c in LOWER for c in password)
    assert any(c in DIGITS for c in password)


def test_length_equal_to_class_count_gives_one_of_each():
    password = generate_password(4)

    for charset in (UPPER, LOWER, DIGITS, SYMBOLS):
        assert sum(c in charset for c in password) == 1


def test_passwords_differ():
    assert generate_password(32) != generate_password(32)


def test_length_below_class_count():
    with pytest.raises(ValidationError):
        generate_password(3)


def test_all_classes_excluded():
    with pytest.raises(ValidationError):
        generate_password(16, True, True, True, True)


@pytest.mark.parametrize("length", [-1, 256])
def test_length_out_of_range(length):
    with pytest.raises(ValidationError):
        generate_password(length)


def test_zero_length_with_classes_included():
    with pytest.raises(ValidationError):
        generate_password(0)
