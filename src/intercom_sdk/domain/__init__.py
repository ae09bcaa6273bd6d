"""Records tipados dos recursos da API."""

from intercom_sdk.domain.common import Pages, Record
from intercom_sdk.domain.company import Companies, Company, CompanyReference
from intercom_sdk.domain.conversation import (
    Author,
    Conversation,
    ConversationMessage,
    ConversationPart,
    ConversationParts,
    Conversations,
)
from intercom_sdk.domain.user import (
    Segment,
    SegmentList,
    Tag,
    TagList,
    User,
    UserCompanies,
    Users,
)

__all__ = [
    "Author",
    "Companies",
    "Company",
    "CompanyReference",
    "Conversation",
    "ConversationMessage",
    "ConversationPart",
    "ConversationParts",
    "Conversations",
    "Pages",
    "Record",
    "Segment",
    "SegmentList",
    "Tag",
    "TagList",
    "User",
    "UserCompanies",
    "Users",
]
