"""
Organization Use Cases
"""

from .branch_use_cases import CreateBranchUseCase, ListBranchesUseCase
from .dtos import (
    BranchResponse,
    CreateBranchCommand,
    CreateOrganizationCommand,
    ListOrganizationsQuery,
    OrganizationListResponse,
    OrganizationResponse,
    UpdateOrganizationCommand,
)
from .organization_use_cases import (
    CreateOrganizationUseCase,
    DeleteOrganizationUseCase,
    GetOrganizationUseCase,
    ListOrganizationsUseCase,
    UpdateOrganizationUseCase,
)

__all__ = [
    "CreateOrganizationUseCase",
    "ListOrganizationsUseCase",
    "GetOrganizationUseCase",
    "UpdateOrganizationUseCase",
    "DeleteOrganizationUseCase",
    "CreateBranchUseCase",
    "ListBranchesUseCase",
    "CreateOrganizationCommand",
    "UpdateOrganizationCommand",
    "ListOrganizationsQuery",
    "CreateBranchCommand",
    "OrganizationResponse",
    "OrganizationListResponse",
    "BranchResponse",
]
