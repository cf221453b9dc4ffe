"""
Validação de email com opções padrão (strict, tamanho 3..320).

Cobre formato RFC822/RFC1035 e a política padrão de tamanho.
"""

import pytest

LONG_ADDRESS = "a@" + "a" * 315 + ".com"


@pytest.fixture
def registry(registry):
    registry.validates_as_email_address("email")
    return registry


class TestDefaultLength:
    """Política padrão de tamanho."""

    def test_should_not_allow_email_addresses_shorter_than_3_characters(
        self, registry, new_user
    ) -> None:
        """'a@' é malformado e curto: duas mensagens."""
        errors = registry.validate(new_user(email="a@"))

        assert not errors.is_empty
        assert errors.on("email") == [
            "is invalid",
            "is too short (minimum is 3 characters)",
        ]

    def test_should_not_allow_email_addresses_longer_than_320_characters(
        self, registry, new_user
    ) -> None:
        """Formato válido, apenas o tamanho falha."""
        assert len(LONG_ADDRESS) == 321

        errors = registry.validate(new_user(email=LONG_ADDRESS))

        assert errors.on("email") == ["is too long (maximum is 320 characters)"]

    def test_boundaries_are_inclusive(self, registry, new_user) -> None:
        at_maximum = "a@" + "a" * 314 + ".com"

        assert len(at_maximum) == 320
        assert registry.is_valid(new_user(email=at_maximum))
        assert registry.is_valid(new_user(email="ab@cd")) is True


class TestDefaultFormat:
    """Formato RFC822 com domínio RFC1035 (modo estrito)."""

    @pytest.mark.parametrize(
        "address",
        [
            "test@example",
            "test@example.com",
            "test@example.co.uk",
            "\"J. Smith's House, a.k.a. Home!\"@example.com",
            "test@123.com",
        ],
    )
    def test_should_allow_legal_rfc822_formats(self, registry, new_user, address) -> None:
        assert registry.is_valid(new_user(email=address)), f"{address} should be legal."

    @pytest.mark.parametrize(
        "address",
        [
            "test@Monday 1:00",
            "test@Monday the first",
            "J. Smith's House, a.k.a. Home!@example.com",
        ],
    )
    def test_should_not_allow_illegal_rfc822_formats(
        self, registry, new_user, address
    ) -> None:
        errors = registry.validate(new_user(email=address))

        assert errors.on("email") == ["is invalid"], f"{address} should be illegal."

    @pytest.mark.parametrize(
        "address",
        [
            "test@[127.0.0.1]",
            "test@-domain_not_starting_with_letter.com",
            "test@domain_not_ending_with_alphanum-.com",
        ],
    )
    def test_should_not_allow_illegal_rfc1035_formats(
        self, registry, new_user, address
    ) -> None:
        assert not registry.is_valid(new_user(email=address)), f"{address} should be illegal."

    def test_single_character_domain_label_is_illegal(self, registry, new_user) -> None:
        errors = registry.validate(new_user(email="a@a"))

        assert errors.on("email") == ["is invalid"]

    def test_empty_value_reports_format_and_length(self, registry, new_user) -> None:
        errors = registry.validate(new_user(email=""))

        assert errors.count == 2

    def test_nil_value_is_validated_as_empty(self, registry, new_user) -> None:
        errors = registry.validate(new_user(email=None))

        assert errors.on("email")[0] == "is invalid"
        assert len(errors.on("email")) == 2
