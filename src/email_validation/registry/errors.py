"""Coleção de erros por campo, na ordem em que foram registrados."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from email_validation.types.result import ValidationResult


def humanize(field: str) -> str:
    """Converte nome de campo em rótulo legível (email_address -> Email address)."""
    label = field.removesuffix("_id").replace("_", " ").strip()
    return label[:1].upper() + label[1:]


class ValidationErrors:
    """Erros de validação agrupados por campo."""

    __slots__ = ("_errors",)

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add(self, field: str, message: str) -> None:
        """Registra uma mensagem para o campo."""
        self._errors.setdefault(field, []).append(message)

    def extend(self, field: str, messages: Iterable[str]) -> None:
        for message in messages:
            self.add(field, message)

    def merge(self, result: ValidationResult) -> None:
        """Anexa as mensagens de um ValidationResult."""
        self.extend(result.field, result.messages)

    def on(self, field: str) -> list[str]:
        """Mensagens do campo (cópia; vazia quando válido)."""
        return list(self._errors.get(field, []))

    @property
    def fields(self) -> list[str]:
        """Campos com ao menos um erro."""
        return list(self._errors)

    @property
    def count(self) -> int:
        """Total de mensagens em todos os campos."""
        return sum(len(messages) for messages in self._errors.values())

    @property
    def is_empty(self) -> bool:
        return not self._errors

    def full_messages(self) -> list[str]:
        """Mensagens prefixadas pelo rótulo do campo (ex: "Email is invalid")."""
        return [
            f"{humanize(field)} {message}"
            for field, messages in self._errors.items()
            for message in messages
        ]

    def to_dict(self) -> dict[str, list[str]]:
        return {field: list(messages) for field, messages in self._errors.items()}

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for field, messages in self._errors.items():
            for message in messages:
                yield field, message

    def __len__(self) -> int:
        return self.count

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __repr__(self) -> str:
        return f"ValidationErrors({self._errors!r})"
