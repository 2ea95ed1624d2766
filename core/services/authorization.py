# core/services/authorization.py

from core.sa.models import LedgerState

class CatalogPolicy:
    """Decides who may add and remove catalog entries"""

    def can_manage_catalog(self, caller: str, state: LedgerState) -> bool:
        raise NotImplementedError

class StorekeeperPolicy(CatalogPolicy):
    """Only the storekeeper fixed at initialization manages the catalog"""

    def can_manage_catalog(self, caller: str, state: LedgerState) -> bool:
        return caller == state.storekeeper
