"""Resource clients da API Intercom.

Cada client expõe operações síncronas e a contraparte `<op>_async`, com a
mesma validação e a mesma semântica de sucesso/erro.
"""

from .base import ResourceClient
from .companies import CompaniesClient
from .conversations import ConversationsClient
from .users import UsersClient

__all__ = [
    "CompaniesClient",
    "ConversationsClient",
    "ResourceClient",
    "UsersClient",
]
