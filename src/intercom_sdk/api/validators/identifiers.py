"""Resolução de identificadores para lookup (view/delete).

O alvo de um lookup é uma variante tagueada:
- ById: id primário → caminho `<recurso>/<id>`
- ByRecord: record → precedência fixa (id primário, id externo, chave natural)
- ByParameters: mapeamento explícito → query string (não pode ser vazio)

Nunca se envia combinação de identificadores: vence o primeiro presente.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pydantic import BaseModel

from intercom_sdk.api.validators.arguments import has_value
from intercom_sdk.utils.errors import InvalidArgument


@dataclass(frozen=True)
class ById:
    id: str


@dataclass(frozen=True)
class ByRecord:
    record: BaseModel


@dataclass(frozen=True)
class ByParameters:
    parameters: Mapping[str, str]


LookupTarget = ById | ByRecord | ByParameters


@dataclass(frozen=True)
class IdentifierScheme:
    """Campos identificadores de um recurso, em ordem de precedência.

    Attributes:
        primary: Campo do id primário (lookup por caminho)
        alternates: Campos alternativos (lookup por query), em ordem
    """

    primary: str
    alternates: tuple[str, ...]

    @property
    def all_fields(self) -> tuple[str, ...]:
        return (self.primary, *self.alternates)


@dataclass(frozen=True)
class ResolvedLookup:
    """Resultado da resolução: exatamente um entre path_id e parameters."""

    path_id: str | None = None
    parameters: dict[str, str] | None = None


def as_lookup_target(target: object) -> LookupTarget:
    """Normaliza str / record / mapping para a variante tagueada."""
    if isinstance(target, (ById, ByRecord, ByParameters)):
        return target
    if target is None:
        raise InvalidArgument("alvo do lookup é obrigatório")
    if isinstance(target, str):
        return ById(target)
    if isinstance(target, BaseModel):
        return ByRecord(target)
    if isinstance(target, Mapping):
        return ByParameters(target)
    raise InvalidArgument(f"alvo de lookup não suportado: {type(target).__name__}")


def resolve_lookup(target: object, scheme: IdentifierScheme) -> ResolvedLookup:
    """Resolve o alvo em lookup por caminho ou por query.

    Raises:
        InvalidArgument: Id vazio, record sem identificadores ou
            mapeamento vazio.
    """
    lookup = as_lookup_target(target)

    if isinstance(lookup, ById):
        if not has_value(lookup.id):
            raise InvalidArgument(f"'{scheme.primary}' é obrigatório")
        return ResolvedLookup(path_id=lookup.id)

    if isinstance(lookup, ByParameters):
        if not lookup.parameters:
            raise InvalidArgument("'parameters' não pode ser vazio")
        return ResolvedLookup(parameters={str(k): str(v) for k, v in lookup.parameters.items()})

    record = lookup.record
    primary = getattr(record, scheme.primary, None)
    if has_value(primary):
        return ResolvedLookup(path_id=str(primary))

    for field in scheme.alternates:
        value = getattr(record, field, None)
        if has_value(value):
            return ResolvedLookup(parameters={field: str(value)})

    names = ", ".join(f"'{field}'" for field in scheme.all_fields)
    raise InvalidArgument(f"informe ao menos um entre {names} para o lookup")
