"""Service accounts: non-human identities with unique names and emails."""

from .filters import ServiceAccountFilter
from .models import ServiceAccount
from .repository import ServiceAccountRepository
from .schemas import ServiceAccountCreatePayload, ServiceAccountOut, ServiceAccountUpdatePayload
from .sorting import ServiceAccountSortField, ServiceAccountSortOrder

__all__ = [
    "ServiceAccount",
    "ServiceAccountCreatePayload",
    "ServiceAccountFilter",
    "ServiceAccountOut",
    "ServiceAccountRepository",
    "ServiceAccountSortField",
    "ServiceAccountSortOrder",
    "ServiceAccountUpdatePayload",
]
