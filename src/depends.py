from typing import Optional
from uuid import UUID

from fastapi import Depends, Header, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError, ServerError
from src.api.utils.jwt import verify_jwt
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.context import RequestContext, ResolveTenantUseCase, TenantContext

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Returns:
        Decoded JWT payload containing user_id, role and optionally tenant_id

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    payload = verify_jwt(credentials.credentials)

    if payload is None or "user_id" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return payload


async def get_tenant_context(
    request: Request,
    uow: UnitOfWork = Depends(get_unit_of_work),
    x_tenant_id: Optional[str] = Header(None, alias="X-Tenant-ID"),
    x_tenant_subdomain: Optional[str] = Header(None, alias="X-Tenant-Subdomain"),
) -> TenantContext:
    """
    Resolve the tenant for this request and attach it to request.state.

    Raises:
        ClientError: 404 TENANT_NOT_FOUND, 403 TENANT_INACTIVE
    """
    use_case = ResolveTenantUseCase(uow)
    result = await use_case.execute(
        tenant_id_header=x_tenant_id,
        subdomain_header=x_tenant_subdomain,
        host=request.headers.get("host"),
    )

    if result.is_err():
        error = result.error
        if error.code == "TENANT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        if error.code == "TENANT_INACTIVE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    request.state.tenant = result.value
    return result.value


async def get_request_context(
    current_user: dict = Depends(get_current_user),
    tenant: TenantContext = Depends(get_tenant_context),
) -> RequestContext:
    """
    Combine resolved tenant and authenticated user.

    A token bound to a tenant (tenant_id claim) may only be used against
    that tenant.
    """
    token_tenant = current_user.get("tenant_id")
    if token_tenant is not None and token_tenant != str(tenant.tenant_id):
        raise ClientError(
            Error("TENANT_MISMATCH", "Token is not valid for this tenant"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    try:
        user_id = UUID(current_user["user_id"])
    except (ValueError, TypeError, AttributeError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return RequestContext(
        tenant=tenant,
        user_id=user_id,
        role=current_user.get("role", "member"),
    )
