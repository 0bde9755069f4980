# Services/customer_mapper.py
"""
Conversions between the API payloads and the Customer table.

``to_record`` builds a fresh row from a request; ``to_view`` projects a
stored row into the outbound schema, leaving out the password.
"""
from datetime import datetime
from Models import Customer, CustomerStatus
from .customer_schemas import CustomerRequest, CustomerResponse
from .passwords import auto_generate_hash_password


def to_record(request: CustomerRequest, now: datetime) -> Customer:
    return Customer(
        user_name=request.user_name,
        first_name=request.first_name,
        last_name=request.last_name,
        customer_age=request.customer_age,
        customer_mobile_number=request.customer_mobile_number,
        customer_email_address=request.customer_email_address,
        customer_address=request.customer_address,
        start_date=request.start_date,
        user_status=CustomerStatus.ACTIVE,
        password=auto_generate_hash_password(),
        created_date=now,
        updated_date=now
    )


def to_view(record: Customer) -> CustomerResponse:
    return CustomerResponse(
        customer_id=record.id,
        user_name=record.user_name,
        first_name=record.first_name,
        last_name=record.last_name,
        customer_age=record.customer_age,
        customer_email_address=record.customer_email_address,
        customer_mobile_number=record.customer_mobile_number,
        customer_address=record.customer_address,
        user_status=record.user_status,
        start_date=record.start_date,
        created_date=record.created_date,
        updated_date=record.updated_date
    )
