"""SDK tipado para a API REST da Intercom (usuários, empresas, conversas).

Uso:
    from intercom_sdk import Authentication, User, UsersClient

    auth = Authentication.with_token("dG9rOmFiYzEyMw==")
    with UsersClient(auth) as users:
        user = users.create(User(user_id="abc", email="ana@example.com"))
        same = users.view(user.id)
"""

import logging

from intercom_sdk.api.clients import (
    CompaniesClient,
    ConversationsClient,
    ResourceClient,
    UsersClient,
)
from intercom_sdk.api.connectors import ApiRequest, Authentication, ClientResponse
from intercom_sdk.api.validators import ById, ByParameters, ByRecord
from intercom_sdk.config.settings import IntercomSettings, get_intercom_settings
from intercom_sdk.domain import (
    Companies,
    Company,
    CompanyReference,
    Conversation,
    Conversations,
    Pages,
    User,
    Users,
)
from intercom_sdk.utils.errors import (
    ApiError,
    ApiErrorDetail,
    DecodeFailure,
    IntercomError,
    InvalidArgument,
    NotFoundError,
    PaginationNotSupported,
    TransportFailure,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ApiErrorDetail",
    "ApiRequest",
    "Authentication",
    "ById",
    "ByParameters",
    "ByRecord",
    "ClientResponse",
    "Companies",
    "CompaniesClient",
    "Company",
    "CompanyReference",
    "Conversation",
    "Conversations",
    "ConversationsClient",
    "DecodeFailure",
    "IntercomError",
    "IntercomSettings",
    "InvalidArgument",
    "NotFoundError",
    "Pages",
    "PaginationNotSupported",
    "ResourceClient",
    "TransportFailure",
    "User",
    "Users",
    "UsersClient",
    "get_intercom_settings",
]
