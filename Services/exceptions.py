# Services/exceptions.py
from typing import List, Optional
from fastapi import status

CUSTOMER_ALREADY_EXISTS = "Customer already exists"
CUSTOMER_NOT_EXISTS = "Customer does not exist"


class CustomerServiceError(Exception):
    """Base class for failures raised by the customer lifecycle service."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CustomerAlreadyExistsError(CustomerServiceError):
    """One or more unique fields (userName, emailAddress, mobileNumber) are taken."""
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, fields: List[str], message: Optional[str] = None):
        self.fields = list(fields)
        if message is None:
            message = f"Duplicate fields: {', '.join(self.fields)} _ {CUSTOMER_ALREADY_EXISTS}"
        super().__init__(message)


class CustomerNotFoundError(CustomerServiceError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"{key} {CUSTOMER_NOT_EXISTS}")


class CustomerValidationError(CustomerServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
