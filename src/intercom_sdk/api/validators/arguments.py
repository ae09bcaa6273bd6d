"""Validadores de argumentos simples (pré-condições antes do envio)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from intercom_sdk.utils.errors import InvalidArgument

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def has_value(value: Any) -> bool:
    """True se o valor não é None nem string vazia."""
    return value is not None and value != ""


def require_record(record: Any, name: str) -> None:
    """Exige que o record tenha sido informado."""
    if record is None:
        raise InvalidArgument(f"'{name}' é obrigatório")


def require_id(value: str | None, name: str) -> str:
    """Garante um identificador não vazio e o retorna."""
    if not has_value(value):
        raise InvalidArgument(f"'{name}' é obrigatório")
    return str(value)


def require_any_field(record: Any, fields: Sequence[str], action: str) -> None:
    """Exige ao menos um dos campos preenchido no record.

    Args:
        record: Record a validar
        fields: Campos aceitos, ex: ("user_id", "email")
        action: Nome da operação, usado na mensagem
    """
    if not any(has_value(getattr(record, field, None)) for field in fields):
        names = ", ".join(f"'{field}'" for field in fields)
        raise InvalidArgument(f"informe ao menos um entre {names} para {action}")


def require_positive_timestamp(timestamp: int, name: str = "timestamp") -> int:
    """Rejeita epochs zero/negativos em vez de repassá-los à API."""
    if isinstance(timestamp, bool) or not isinstance(timestamp, int):
        raise InvalidArgument(f"'{name}' deve ser um inteiro (epoch em segundos)")
    if timestamp <= 0:
        raise InvalidArgument(f"'{name}' deve ser maior que zero")
    return timestamp


def require_non_empty_ids(values: Iterable[str] | None, name: str) -> list[str]:
    """Exige coleção não vazia de ids não vazios."""
    if values is None:
        raise InvalidArgument(f"'{name}' é obrigatório")
    items = list(values)
    if not items:
        raise InvalidArgument(f"'{name}' não pode ser vazio")
    if not all(has_value(item) for item in items):
        raise InvalidArgument(f"'{name}' contém id vazio")
    return [str(item) for item in items]
