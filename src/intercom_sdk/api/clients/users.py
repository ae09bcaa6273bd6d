"""Client de usuários (endpoint `users`).

Referência: https://developers.intercom.io/reference#users
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from intercom_sdk.api.clients.base import ResourceClient
from intercom_sdk.api.connectors.models import ApiRequest
from intercom_sdk.api.payload_builders import (
    build_last_seen_body,
    build_new_session_body,
    build_record_body,
    build_remove_companies_body,
)
from intercom_sdk.api.validators import (
    IdentifierScheme,
    require_any_field,
    require_id,
    require_non_empty_ids,
    require_positive_timestamp,
    require_record,
)
from intercom_sdk.domain import User, Users

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from intercom_sdk.api.validators import LookupTarget

    UserLookup = str | User | Mapping[str, str] | LookupTarget


class UsersClient(ResourceClient):
    """Operações sobre usuários.

    Precedência de identificadores: `id` → `user_id` → `email`.
    Create e update usam o mesmo verbo (POST users), que é um upsert na API.
    """

    resource = "users"
    identifiers = IdentifierScheme(primary="id", alternates=("user_id", "email"))

    # Montagem

    def _build_create(self, user: User | None) -> ApiRequest:
        require_record(user, "user")
        require_any_field(user, ("user_id", "email"), "criar um usuário")
        return ApiRequest("POST", self.resource, json=build_record_body(user))

    def _build_update(self, user: User | None) -> ApiRequest:
        require_record(user, "user")
        require_any_field(user, self.identifiers.all_fields, "atualizar um usuário")
        return ApiRequest("POST", self.resource, json=build_record_body(user))

    def _target_id(self, user_or_id: User | str | None) -> str:
        """Id primário exigido pelas mutações específicas."""
        if isinstance(user_or_id, User):
            return require_id(user_or_id.id, "user.id")
        return require_id(user_or_id, "id")

    def _build_last_seen(self, user_or_id: User | str | None, timestamp: int | None) -> ApiRequest:
        user_id = self._target_id(user_or_id)
        if timestamp is not None:
            require_positive_timestamp(timestamp)
        return ApiRequest("POST", self.resource, json=build_last_seen_body(user_id, timestamp))

    def _build_new_session(self, user_or_id: User | str | None) -> ApiRequest:
        user_id = self._target_id(user_or_id)
        return ApiRequest("POST", self.resource, json=build_new_session_body(user_id))

    def _build_remove_companies(
        self,
        user_or_id: User | str | None,
        company_ids: Iterable[str] | None,
    ) -> ApiRequest:
        user_id = self._target_id(user_or_id)
        ids = require_non_empty_ids(company_ids, "company_ids")
        return ApiRequest("POST", self.resource, json=build_remove_companies_body(user_id, ids))

    # Sync

    def create(self, user: User) -> User:
        """Cria um usuário. Exige `user_id` ou `email`."""
        return self._send(self._build_create(user), User)

    def update(self, user: User) -> User:
        """Atualiza um usuário. Exige `id`, `user_id` ou `email`."""
        return self._send(self._build_update(user), User)

    def view(self, target: UserLookup) -> User:
        """Busca um usuário por id, por record ou por parâmetros.

        Args:
            target: id (str), User ou mapeamento não vazio de parâmetros

        Raises:
            InvalidArgument: Nenhum identificador resolvível.
            NotFoundError: Usuário inexistente.
        """
        return self._send(self._build_lookup("GET", target), User)

    def list(self, parameters: Mapping[str, str] | None = None) -> Users:
        """Lista usuários (primeira página), com filtros opcionais."""
        return self._send(self._build_list(parameters), Users)

    def delete(self, target: UserLookup) -> User:
        """Remove um usuário; retorna o record removido."""
        return self._send(self._build_lookup("DELETE", target), User)

    def update_last_seen_at(self, user_or_id: User | str, timestamp: int | None = None) -> User:
        """Atualiza o último acesso do usuário.

        Args:
            user_or_id: User com `id` ou o id primário
            timestamp: Epoch em segundos (> 0); None usa o horário do servidor
        """
        return self._send(self._build_last_seen(user_or_id, timestamp), User)

    def increment_user_session(self, user_or_id: User | str) -> User:
        return self._send(self._build_new_session(user_or_id), User)

    def remove_company_from_user(
        self,
        user_or_id: User | str,
        company_ids: Iterable[str],
    ) -> User:
        """Desvincula uma ou mais empresas do usuário."""
        return self._send(self._build_remove_companies(user_or_id, company_ids), User)

    # Async

    async def create_async(self, user: User) -> User:
        return await self._send_async(self._build_create(user), User)

    async def update_async(self, user: User) -> User:
        return await self._send_async(self._build_update(user), User)

    async def view_async(self, target: UserLookup) -> User:
        return await self._send_async(self._build_lookup("GET", target), User)

    async def list_async(self, parameters: Mapping[str, str] | None = None) -> Users:
        return await self._send_async(self._build_list(parameters), Users)

    async def delete_async(self, target: UserLookup) -> User:
        return await self._send_async(self._build_lookup("DELETE", target), User)

    async def update_last_seen_at_async(
        self,
        user_or_id: User | str,
        timestamp: int | None = None,
    ) -> User:
        return await self._send_async(self._build_last_seen(user_or_id, timestamp), User)

    async def increment_user_session_async(self, user_or_id: User | str) -> User:
        return await self._send_async(self._build_new_session(user_or_id), User)

    async def remove_company_from_user_async(
        self,
        user_or_id: User | str,
        company_ids: Iterable[str],
    ) -> User:
        return await self._send_async(self._build_remove_companies(user_or_id, company_ids), User)
