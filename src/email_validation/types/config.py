"""Configuração declarativa da validação de email.

Traduz as opções de `validates_as_email_address` (minimum, maximum,
is, within/in, too_short, too_long, wrong_length, wrong_format,
strict, allow_nil, if, unless) para um objeto imutável.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from email_validation.constants import (
    DEFAULT_MAXIMUM_LENGTH,
    DEFAULT_MINIMUM_LENGTH,
    DEFAULT_TOO_LONG_MESSAGE,
    DEFAULT_TOO_SHORT_MESSAGE,
    DEFAULT_WRONG_FORMAT_MESSAGE,
    DEFAULT_WRONG_LENGTH_MESSAGE,
    LENGTH_OPTIONS,
)
from utils.errors import ConflictingLengthOptionsError, InvalidConfigurationError

# Predicado sobre o registro: callable(record) ou nome de atributo/método
Predicate = Callable[[Any], Any] | str


class ValidationConfig(BaseModel):
    """Opções de validação de um campo de email.

    No máximo uma restrição de tamanho (minimum, maximum, exact, range)
    pode estar ativa. Sem nenhuma, vale a política padrão
    default_minimum..default_maximum.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Restrições de tamanho (mutuamente exclusivas)
    minimum: int | None = Field(None, ge=0)
    maximum: int | None = Field(None, ge=0)
    exact: int | None = Field(
        None, ge=0, validation_alias=AliasChoices("exact", "is")
    )
    range: tuple[int, int] | None = Field(
        None, validation_alias=AliasChoices("range", "within", "in")
    )

    # Formato
    strict: bool = True
    allow_nil: bool = False

    # Mensagens
    too_short: str = DEFAULT_TOO_SHORT_MESSAGE
    too_long: str = DEFAULT_TOO_LONG_MESSAGE
    wrong_length: str = DEFAULT_WRONG_LENGTH_MESSAGE
    wrong_format: str = DEFAULT_WRONG_FORMAT_MESSAGE

    # Condições
    if_: Predicate | None = Field(None, validation_alias=AliasChoices("if_", "if"))
    unless: Predicate | None = None

    # Política padrão de tamanho
    default_minimum: int = Field(DEFAULT_MINIMUM_LENGTH, ge=0)
    default_maximum: int = Field(DEFAULT_MAXIMUM_LENGTH, ge=0)

    @classmethod
    def from_options(
        cls,
        options: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> ValidationConfig:
        """Cria configuração a partir de opções declarativas.

        Aceita os nomes originais das opções, inclusive os que são
        palavras reservadas em Python (`is`, `in`, `if`) via mapping.

        Raises:
            ConflictingLengthOptionsError: Mais de uma restrição de tamanho.
            InvalidConfigurationError: Opção desconhecida ou valor inválido.
        """
        values = {**(options or {}), **kwargs}
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise _configuration_error(exc) from exc

    @property
    def length_option(self) -> str | None:
        """Nome da restrição de tamanho explícita, se houver."""
        for name in LENGTH_OPTIONS:
            if getattr(self, name) is not None:
                return name
        return None

    @field_validator("range", mode="before")
    @classmethod
    def coerce_range(cls, value: Any) -> Any:
        if isinstance(value, range):
            if value.step != 1 or len(value) == 0:
                raise InvalidConfigurationError(
                    f"range deve ser contíguo e não vazio: {value!r}"
                )
            return (value.start, value.stop - 1)
        return value

    @field_validator("range")
    @classmethod
    def check_range_bounds(cls, value: tuple[int, int] | None) -> tuple[int, int] | None:
        if value is None:
            return value
        low, high = value
        if low < 0 or low > high:
            raise InvalidConfigurationError(
                f"range inválido: ({low}, {high}); esperado 0 <= início <= fim"
            )
        return value

    @model_validator(mode="after")
    def check_length_options(self) -> ValidationConfig:
        active = [name for name in LENGTH_OPTIONS if getattr(self, name) is not None]
        if len(active) > 1:
            raise ConflictingLengthOptionsError(
                f"Opções de tamanho conflitantes: {', '.join(active)}. "
                "Informe apenas uma entre minimum, maximum, is e within/in."
            )
        if self.default_minimum > self.default_maximum:
            raise InvalidConfigurationError(
                "default_minimum não pode ser maior que default_maximum"
            )
        return self


def _configuration_error(exc: ValidationError) -> InvalidConfigurationError:
    """Converte ValidationError do pydantic na exceção do domínio.

    Preserva a exceção original quando um validator já levantou uma
    InvalidConfigurationError (ex: opções de tamanho conflitantes).
    """
    problems: list[str] = []
    for error in exc.errors():
        original = error.get("ctx", {}).get("error")
        if isinstance(original, InvalidConfigurationError):
            return original
        location = ".".join(str(part) for part in error["loc"]) or "options"
        problems.append(f"{location}: {error['msg']}")
    return InvalidConfigurationError("; ".join(problems))
