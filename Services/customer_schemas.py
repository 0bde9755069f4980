# Services/customer_schemas.py
from pydantic import BaseModel, ConfigDict, EmailStr, constr, conint
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional, Union
from datetime import date, datetime
from Models import CustomerStatus


class CamelModel(BaseModel):
    """Snake_case attributes in Python, camelCase keys on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CustomerRequest(CamelModel):
    """
    Payload for creating or updating a customer.

    Attributes:
        user_name: Unique login name
        customer_mobile_number: Unique mobile number, also the update key
        customer_email_address: Unique email address
        start_date: Optional ISO date the customer started
    """
    user_name: constr(min_length=1, max_length=100)
    first_name: Optional[constr(max_length=100)] = None
    last_name: Optional[constr(max_length=100)] = None
    customer_age: Optional[conint(ge=0, le=150)] = None
    customer_mobile_number: constr(min_length=1, max_length=20)
    customer_email_address: EmailStr
    customer_address: Optional[constr(max_length=200)] = None
    start_date: Optional[date] = None


class CustomerResponse(CamelModel):
    """Outbound view of a customer. The password never appears here."""
    customer_id: str
    user_name: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    customer_age: Optional[int] = None
    customer_email_address: str
    customer_mobile_number: str
    customer_address: Optional[str] = None
    user_status: CustomerStatus
    start_date: Optional[date] = None
    created_date: datetime
    updated_date: datetime


class ApiResponse(CamelModel):
    code: int
    message: str
    data: Optional[Union[CustomerResponse, List[CustomerResponse]]] = None


class ErrorResponse(CamelModel):
    code: int
    message: str
    data: Optional[Any] = None
