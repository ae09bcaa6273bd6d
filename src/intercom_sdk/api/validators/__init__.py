"""Validação local de argumentos antes de qualquer chamada de rede.

Uso:
    from intercom_sdk.api.validators import IdentifierScheme, resolve_lookup

    scheme = IdentifierScheme(primary="id", alternates=("user_id", "email"))
    resolved = resolve_lookup(user, scheme)
"""

from intercom_sdk.api.validators.arguments import (
    has_value,
    require_any_field,
    require_id,
    require_non_empty_ids,
    require_positive_timestamp,
    require_record,
)
from intercom_sdk.api.validators.identifiers import (
    ById,
    ByParameters,
    ByRecord,
    IdentifierScheme,
    LookupTarget,
    ResolvedLookup,
    as_lookup_target,
    resolve_lookup,
)

__all__ = [
    "ById",
    "ByParameters",
    "ByRecord",
    "IdentifierScheme",
    "LookupTarget",
    "ResolvedLookup",
    "as_lookup_target",
    "has_value",
    "require_any_field",
    "require_id",
    "require_non_empty_ids",
    "require_positive_timestamp",
    "require_record",
]
