"""Regra de formato do endereço."""

from email_validation.patterns import pattern_for


def format_violation(value: str, strict: bool = True) -> str | None:
    """Retorna a regra violada ("rfc822" ou "rfc1035"), ou None se válido."""
    if pattern_for(False).fullmatch(value) is None:
        return "rfc822"
    if strict and pattern_for(True).fullmatch(value) is None:
        return "rfc1035"
    return None


def matches_format(value: str, strict: bool = True) -> bool:
    return pattern_for(strict).fullmatch(value) is not None
