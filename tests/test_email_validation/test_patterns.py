"""Testes para as gramáticas RFC822 / RFC1035."""

import pytest

from email_validation.patterns import (
    STRICT_EMAIL_ADDRESS,
    UNRESTRICTED_EMAIL_ADDRESS,
    pattern_for,
)
from email_validation.rules import format_violation, matches_format


def test_pattern_for_selects_by_mode() -> None:
    assert pattern_for(True) is STRICT_EMAIL_ADDRESS
    assert pattern_for(False) is UNRESTRICTED_EMAIL_ADDRESS


@pytest.mark.parametrize(
    "address",
    [
        "test@example.com",
        "first.last@example.com",
        "o'reilly+tag@example.com",
        '"quoted\\"pair"@example.com',
        '"a@b"@example.com',
        "test@sub-domain.example.com",
        "test@1example.com",
    ],
)
def test_strict_accepts(address) -> None:
    assert matches_format(address, strict=True)


@pytest.mark.parametrize(
    ("address", "violation"),
    [
        ("", "rfc822"),
        ("plainaddress", "rfc822"),
        ("two@@example.com", "rfc822"),
        ("dot.@example.com", "rfc822"),
        ("test@example..com", "rfc822"),
        ("test@example.com.", "rfc822"),
        ("test@[127.0.0.1]", "rfc1035"),
        ("test@a", "rfc1035"),
        ("test@example.c", "rfc1035"),
        ("test@under_score.com", "rfc1035"),
        ("test@-leading.com", "rfc1035"),
        ("test@trailing-.com", "rfc1035"),
    ],
)
def test_strict_rejects(address, violation) -> None:
    assert format_violation(address, strict=True) == violation


@pytest.mark.parametrize(
    "address",
    [
        "test@[127.0.0.1]",
        "test@a",
        "test@under_score.com",
        "test@-leading.com",
    ],
)
def test_unrestricted_only_checks_rfc822(address) -> None:
    assert format_violation(address, strict=False) is None


def test_long_labels_are_not_capped() -> None:
    """Tamanho de label não é limitado; só a regra de tamanho total."""
    assert matches_format("a@" + "a" * 315 + ".com", strict=True)


def test_newline_is_not_accepted() -> None:
    assert not matches_format("test@example.com\n", strict=True)
    assert not matches_format("test@example.com\n", strict=False)


@pytest.mark.parametrize(
    ("address", "strict"),
    [
        ("用户@example.com", True),
        ("usér@example.com", True),
        ("a@例子.com", True),
        ("a@例子.com", False),
        ("用户@example.com", False),
        ('"用户"@example.com', False),
        ("a@[例子]", False),
    ],
)
def test_non_ascii_is_rejected(address, strict) -> None:
    """RFC822 é ASCII: qualquer code point acima de 0x7f é inválido."""
    assert format_violation(address, strict=strict) == "rfc822"
