from abc import ABC, abstractmethod

from src.app.repositories.account_repository import IAccountRepository
from src.app.repositories.audit_event_repository import IAuditEventRepository
from src.app.repositories.branch_repository import IBranchRepository
from src.app.repositories.customer_repository import ICustomerRepository
from src.app.repositories.journal_entry_repository import IJournalEntryRepository
from src.app.repositories.organization_repository import IOrganizationRepository
from src.app.repositories.product_repository import IProductRepository
from src.app.repositories.sales_order_repository import ISalesOrderRepository
from src.app.repositories.stock_movement_repository import IStockMovementRepository
from src.app.repositories.tenant_repository import ITenantRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    tenants: ITenantRepository
    organizations: IOrganizationRepository
    branches: IBranchRepository
    accounts: IAccountRepository
    journal_entries: IJournalEntryRepository
    products: IProductRepository
    stock_movements: IStockMovementRepository
    customers: ICustomerRepository
    sales_orders: ISalesOrderRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
