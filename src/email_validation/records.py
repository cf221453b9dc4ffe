"""Acesso a valores de registros validados (mappings ou objetos)."""

from collections.abc import Mapping
from typing import Any


def read_field(record: Any, field: str) -> Any:
    """Lê o valor do campo: chave para mappings, atributo para o resto.

    Chave ausente em mapping vale None; atributo ausente propaga
    AttributeError.
    """
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field)
