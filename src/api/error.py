from fastapi import status
from libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Business error code -> HTTP status. Anything unmapped is a server error.
ERROR_STATUS = {
    "TENANT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TENANT_INACTIVE": status.HTTP_403_FORBIDDEN,
    "TENANT_MISMATCH": status.HTTP_403_FORBIDDEN,
    "TENANT_HAS_ORGANIZATIONS": status.HTTP_409_CONFLICT,
    "SUBDOMAIN_TAKEN": status.HTTP_409_CONFLICT,
    "DOMAIN_TAKEN": status.HTTP_409_CONFLICT,
    "ORGANIZATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "BRANCH_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PARENT_ACCOUNT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ACCOUNT_CODE_TAKEN": status.HTTP_409_CONFLICT,
    "ACCOUNT_HIERARCHY_CYCLE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "ENTRY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ENTRY_NUMBER_TAKEN": status.HTTP_409_CONFLICT,
    "ENTRY_ALREADY_POSTED": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "ENTRY_NOT_EDITABLE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_STATUS_TRANSITION": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "UNBALANCED_ENTRY": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_LINES": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "PRODUCT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CATEGORY_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PRODUCT_CODE_TAKEN": status.HTTP_409_CONFLICT,
    "PRODUCT_HIERARCHY_CYCLE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "PRODUCT_NOT_STOCKED": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "MOVEMENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "CUSTOMER_CODE_TAKEN": status.HTTP_409_CONFLICT,
    "CUSTOMER_INACTIVE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "CUSTOMER_HAS_OPEN_ORDERS": status.HTTP_409_CONFLICT,
    "ORDER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "ORDER_NUMBER_TAKEN": status.HTTP_409_CONFLICT,
    "ORDER_NOT_EDITABLE": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "EMPTY_ORDER": status.HTTP_422_UNPROCESSABLE_ENTITY,
    "INVALID_ORDER_TOTALS": status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def raise_for_error(error: Error):
    """Raise the ClientError / ServerError matching a use case Error"""
    status_code = ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)
