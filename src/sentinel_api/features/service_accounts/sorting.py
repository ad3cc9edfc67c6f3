from __future__ import annotations

from enum import StrEnum

from sentinel_api.common.sorting import SortOrder

from .models import ServiceAccount


class ServiceAccountSortField(StrEnum):
    ID = "id"
    NAME = "name"
    EMAIL = "email"
    DESCRIPTION = "description"
    ENABLED = "enabled"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


ServiceAccountSortOrder = SortOrder[ServiceAccountSortField]

SORT_FIELDS = {
    ServiceAccountSortField.ID: (ServiceAccount.id.asc(), ServiceAccount.id.desc()),
    ServiceAccountSortField.NAME: (ServiceAccount.name.asc(), ServiceAccount.name.desc()),
    ServiceAccountSortField.EMAIL: (ServiceAccount.email.asc(), ServiceAccount.email.desc()),
    ServiceAccountSortField.DESCRIPTION: (
        ServiceAccount.description.asc(),
        ServiceAccount.description.desc(),
    ),
    ServiceAccountSortField.ENABLED: (ServiceAccount.enabled.asc(), ServiceAccount.enabled.desc()),
    ServiceAccountSortField.CREATED_AT: (
        ServiceAccount.created_at.asc(),
        ServiceAccount.created_at.desc(),
    ),
    ServiceAccountSortField.UPDATED_AT: (
        ServiceAccount.updated_at.asc(),
        ServiceAccount.updated_at.desc(),
    ),
}

ID_FIELD = SORT_FIELDS[ServiceAccountSortField.ID]

__all__ = ["ID_FIELD", "SORT_FIELDS", "ServiceAccountSortField", "ServiceAccountSortOrder"]
