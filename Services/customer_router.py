# Services/customer_router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from pydantic import EmailStr, TypeAdapter, ValidationError
from datetime import date
from Models import CustomerStatus
from database import get_db
from .customer_repository import CustomerRepository
from .customer_schemas import ApiResponse, CustomerRequest, ErrorResponse
from .customer_service import CustomerService, utcnow
from .exceptions import CustomerValidationError

CUSTOMER_CREATED_SUCCESS = "Customer created successfully"
CUSTOMER_FETCHED_SUCCESS = "Customer data fetched successfully"
CUSTOMER_UPDATED_SUCCESS = "Customer updated successfully"
CUSTOMER_DELETED_SUCCESS = "Customer deleted successfully"
CUSTOMER_STATUS_UPDATED_SUCCESS = "Customer status updated successfully"

router = APIRouter(
    responses={
        404: {"model": ErrorResponse, "description": "Customer not found"},
        409: {"model": ErrorResponse, "description": "Duplicate userName, emailAddress or mobileNumber"}
    }
)

# Dependencies
def get_clock():
    return utcnow

def get_customer_service(
    db: Session = Depends(get_db),
    clock=Depends(get_clock)
) -> CustomerService:
    return CustomerService(CustomerRepository(db), clock=clock)

def parse_iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise CustomerValidationError(f"Invalid date '{value}', expected YYYY-MM-DD")

_email_adapter = TypeAdapter(EmailStr)

def parse_email(value: str) -> str:
    """Normalize the same way CustomerRequest does, so stored addresses match."""
    try:
        return _email_adapter.validate_python(value)
    except ValidationError:
        raise CustomerValidationError(f"Invalid email address '{value}'")

def ok(message: str, data, code: int = status.HTTP_200_OK) -> ApiResponse:
    return ApiResponse(code=code, message=message, data=data)

# API Endpoints
@router.post("/create",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new customer",
    description="Adds a new customer with unique username, email and mobile number."
)
async def create_customer(
    customer: CustomerRequest,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_CREATED_SUCCESS, service.create_customer(customer), status.HTTP_201_CREATED)

@router.get("/getAllData", response_model=ApiResponse, summary="Get all customers")
async def get_all_customers(service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_all_customers())

@router.get("/getByMobile/{mobile_number}", response_model=ApiResponse, summary="Get customer by mobile")
async def get_by_mobile(mobile_number: str, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_mobile_number(mobile_number))

@router.get("/getByUserName/{user_name}", response_model=ApiResponse, summary="Get customer by username")
async def get_by_user_name(user_name: str, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_user_name(user_name))

@router.get("/getByEmailAddress/{email_address}", response_model=ApiResponse, summary="Get customer by email")
async def get_by_email(email_address: str, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_email_address(parse_email(email_address)))

@router.put("/update",
    response_model=ApiResponse,
    summary="Update customer details",
    description="""
    Update an existing customer's details, matched by mobile number.
    The mobile number and status are not changed by this endpoint.
    """
)
async def update_customer(
    customer: CustomerRequest,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_UPDATED_SUCCESS, service.update_customer(customer))

@router.delete("/delete/{mobile_number}",
    response_model=ApiResponse,
    summary="Delete customer",
    description="""
    Soft-delete a customer by marking it as INACTIVE.
    The record remains in the database and can still be fetched.
    """
)
async def delete_customer(mobile_number: str, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_DELETED_SUCCESS, service.delete_customer(mobile_number))

@router.patch("/updateMobileNumber/{user_name}/{mobile_number}",
    response_model=ApiResponse,
    summary="Update mobile number",
    description="Updates a customer's mobile number using their username."
)
async def update_mobile_number(
    user_name: str,
    mobile_number: str = Path(min_length=1, max_length=20),
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_UPDATED_SUCCESS, service.update_mobile_number(user_name, mobile_number))

@router.patch("/status/{mobile_number}/{user_status}",
    response_model=ApiResponse,
    summary="Update status",
    description="Sets the customer status to ACTIVE or INACTIVE, in either direction."
)
async def update_status(
    mobile_number: str,
    user_status: CustomerStatus,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_STATUS_UPDATED_SUCCESS, service.update_status(mobile_number, user_status))

# Searches, each returning a possibly empty list
@router.get("/getByFirstname/{first_name}", response_model=ApiResponse, summary="Find by first name")
async def get_by_first_name(first_name: str, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_first_name(first_name))

@router.get("/getByLastname/{last_name}", response_model=ApiResponse, summary="Find by last name")
async def get_by_last_name(last_name: str, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_last_name(last_name))

@router.get("/getByFirstnameAndLastname/{first_name}/{last_name}",
    response_model=ApiResponse,
    summary="Find by first and last name"
)
async def get_by_first_name_and_last_name(
    first_name: str,
    last_name: str,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_first_name_and_last_name(first_name, last_name))

@router.get("/getByFirstnameOrLastname/{first_name}/{last_name}",
    response_model=ApiResponse,
    summary="Find by first or last name"
)
async def get_by_first_name_or_last_name(
    first_name: str,
    last_name: str,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_first_name_or_last_name(first_name, last_name))

@router.get("/getDistinctByFirstnameAndLastname/{first_name}/{last_name}",
    response_model=ApiResponse,
    summary="Find distinct customers by first and last name"
)
async def get_distinct_by_first_name_and_last_name(
    first_name: str,
    last_name: str,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_distinct_by_first_name_and_last_name(first_name, last_name))

@router.get("/getByAgeLessThan/{age}", response_model=ApiResponse, summary="Find by age less than")
async def get_by_age_less_than(age: int, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_age_less_than(age))

@router.get("/getByAgeLessThanEqual/{age}", response_model=ApiResponse, summary="Find by age less than or equal")
async def get_by_age_less_than_equal(age: int, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_age_less_than_equal(age))

@router.get("/getByAgeGreaterThan/{age}", response_model=ApiResponse, summary="Find by age greater than")
async def get_by_age_greater_than(age: int, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_age_greater_than(age))

@router.get("/getByAgeGreaterThanEqual/{age}", response_model=ApiResponse, summary="Find by age greater than or equal")
async def get_by_age_greater_than_equal(age: int, service: CustomerService = Depends(get_customer_service)):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_age_greater_than_equal(age))

@router.get("/getByStartDateBetween/{start}/{end}",
    response_model=ApiResponse,
    summary="Find by start date range",
    description="Customers whose start date lies between two ISO dates, both inclusive."
)
async def get_by_start_date_between(
    start: str,
    end: str,
    service: CustomerService = Depends(get_customer_service)
):
    return ok(CUSTOMER_FETCHED_SUCCESS, service.get_by_start_date_between(parse_iso_date(start), parse_iso_date(end)))
