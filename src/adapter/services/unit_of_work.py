from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.account_repository import AccountRepository
from src.adapter.repositories.audit_event_repository import AuditEventRepository
from src.adapter.repositories.branch_repository import BranchRepository
from src.adapter.repositories.customer_repository import CustomerRepository
from src.adapter.repositories.journal_entry_repository import JournalEntryRepository
from src.adapter.repositories.organization_repository import OrganizationRepository
from src.adapter.repositories.product_repository import ProductRepository
from src.adapter.repositories.sales_order_repository import SalesOrderRepository
from src.adapter.repositories.stock_movement_repository import StockMovementRepository
from src.adapter.repositories.tenant_repository import TenantRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.tenants = TenantRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.branches = BranchRepository(self.session)
        self.accounts = AccountRepository(self.session)
        self.journal_entries = JournalEntryRepository(self.session)
        self.products = ProductRepository(self.session)
        self.stock_movements = StockMovementRepository(self.session)
        self.customers = CustomerRepository(self.session)
        self.sales_orders = SalesOrderRepository(self.session)
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
