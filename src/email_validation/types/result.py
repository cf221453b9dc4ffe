"""Resultado da validação de um campo."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Mensagens de erro produzidas para um campo.

    Attributes:
        field: Nome do campo validado
        messages: Mensagens em ordem (formato antes de tamanho)
    """

    field: str
    messages: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        """True quando nenhuma mensagem foi registrada."""
        return not self.messages
