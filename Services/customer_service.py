# Services/customer_service.py
"""
Customer lifecycle: creation, lookup, update, soft delete and field patches.

``CustomerService`` holds the only decision-making in the application:
duplicate detection on the unique fields, the not-found rules for keyed
lookups and the soft-delete semantics (status flip, the row is kept).
Timestamps come from an injectable ``clock`` so callers and tests can
control "now".
"""
import logging
from datetime import date, datetime, timezone
from typing import Callable, List, Optional
from sqlalchemy import exc
from Models import Customer, CustomerStatus
from .customer_repository import CustomerRepository
from .customer_schemas import CustomerRequest, CustomerResponse
from .customer_mapper import to_record, to_view
from .exceptions import CustomerAlreadyExistsError, CustomerNotFoundError, CustomerValidationError

logger = logging.getLogger(__name__)

USER_NAME_FIELD = "userName"
EMAIL_ADDRESS_FIELD = "emailAddress"
MOBILE_NUMBER_FIELD = "mobileNumber"


def utcnow() -> datetime:
    """Naive UTC timestamp, matching the DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CustomerService:

    def __init__(self, repository: CustomerRepository, clock: Callable[[], datetime] = utcnow):
        self.repository = repository
        self.clock = clock

    # Create
    def create_customer(self, request: CustomerRequest) -> CustomerResponse:
        """
        Validate uniqueness of userName, email and mobile number, then insert
        a new ACTIVE customer. Every clashing field is reported at once.
        """
        duplicates = self._duplicate_fields(request)
        if duplicates:
            logger.warning("Rejected customer %s, duplicate fields: %s", request.user_name, duplicates)
            raise CustomerAlreadyExistsError(duplicates)

        customer = to_record(request, self.clock())
        try:
            saved = self.repository.insert(customer)
        except exc.IntegrityError:
            # A concurrent create won the race between the check and the insert
            duplicates = self._duplicate_fields(request) or [USER_NAME_FIELD, EMAIL_ADDRESS_FIELD, MOBILE_NUMBER_FIELD]
            logger.warning("Unique constraint rejected customer %s: %s", request.user_name, duplicates)
            raise CustomerAlreadyExistsError(duplicates)

        logger.info("Created customer %s (%s)", saved.id, saved.user_name)
        return to_view(saved)

    def _duplicate_fields(self, request: CustomerRequest) -> List[str]:
        duplicates = []
        if self.repository.exists_by_user_name(request.user_name):
            duplicates.append(USER_NAME_FIELD)
        if self.repository.exists_by_email_address(request.customer_email_address):
            duplicates.append(EMAIL_ADDRESS_FIELD)
        if self.repository.exists_by_mobile_number(request.customer_mobile_number):
            duplicates.append(MOBILE_NUMBER_FIELD)
        return duplicates

    # Keyed lookups
    def get_all_customers(self) -> List[CustomerResponse]:
        return self._views(self.repository.find_all())

    def get_by_mobile_number(self, mobile_number: str) -> CustomerResponse:
        return to_view(self._require_by_mobile(mobile_number))

    def get_by_user_name(self, user_name: str) -> CustomerResponse:
        return to_view(self._require_by_user_name(user_name))

    def get_by_email_address(self, email_address: str) -> CustomerResponse:
        return to_view(self._require(self.repository.find_by_email_address(email_address), email_address))

    def _require_by_mobile(self, mobile_number: str) -> Customer:
        return self._require(self.repository.find_by_mobile_number(mobile_number), mobile_number)

    def _require_by_user_name(self, user_name: str) -> Customer:
        return self._require(self.repository.find_by_user_name(user_name), user_name)

    @staticmethod
    def _require(customer: Optional[Customer], key: str) -> Customer:
        if customer is None:
            logger.warning("No customer found for %s", key)
            raise CustomerNotFoundError(key)
        return customer

    # Mutations
    def update_customer(self, request: CustomerRequest) -> CustomerResponse:
        """
        Overwrite the editable fields of the customer owning
        ``request.customer_mobile_number``.

        The mobile number is the lookup key and is never changed here, and
        neither are the id, status or created timestamp.
        """
        customer = self._require_by_mobile(request.customer_mobile_number)
        customer.user_name = request.user_name
        customer.first_name = request.first_name
        customer.last_name = request.last_name
        customer.customer_age = request.customer_age
        customer.customer_address = request.customer_address
        customer.customer_email_address = request.customer_email_address
        customer.start_date = request.start_date
        customer.updated_date = self.clock()

        customer_id = customer.id
        try:
            saved = self.repository.save(customer)
        except exc.IntegrityError:
            duplicates = self._conflicts_with_others(request, customer_id)
            logger.warning("Update of customer %s rejected, duplicate fields: %s", customer_id, duplicates)
            raise CustomerAlreadyExistsError(duplicates or [USER_NAME_FIELD, EMAIL_ADDRESS_FIELD])

        logger.info("Updated customer %s", saved.id)
        return to_view(saved)

    def _conflicts_with_others(self, request: CustomerRequest, customer_id: str) -> List[str]:
        duplicates = []
        other = self.repository.find_by_user_name(request.user_name)
        if other is not None and other.id != customer_id:
            duplicates.append(USER_NAME_FIELD)
        other = self.repository.find_by_email_address(request.customer_email_address)
        if other is not None and other.id != customer_id:
            duplicates.append(EMAIL_ADDRESS_FIELD)
        return duplicates

    def delete_customer(self, mobile_number: str) -> CustomerResponse:
        """Soft delete: mark the customer INACTIVE, keeping the row."""
        customer = self._require_by_mobile(mobile_number)
        customer.user_status = CustomerStatus.INACTIVE
        customer.updated_date = self.clock()
        saved = self.repository.save(customer)
        logger.info("Soft-deleted customer %s", saved.id)
        return to_view(saved)

    def update_mobile_number(self, user_name: str, mobile_number: str) -> CustomerResponse:
        customer = self._require_by_user_name(user_name)

        # Re-applying the customer's own number is allowed
        holder = self.repository.find_by_mobile_number(mobile_number)
        if holder is not None and holder.id != customer.id:
            logger.warning("Mobile number %s already belongs to customer %s", mobile_number, holder.id)
            raise CustomerAlreadyExistsError([MOBILE_NUMBER_FIELD])

        customer.customer_mobile_number = mobile_number
        customer.updated_date = self.clock()
        customer_id = customer.id
        try:
            saved = self.repository.save(customer)
        except exc.IntegrityError:
            logger.warning("Unique constraint rejected mobile number %s for customer %s", mobile_number, customer_id)
            raise CustomerAlreadyExistsError([MOBILE_NUMBER_FIELD])

        logger.info("Changed mobile number of customer %s", saved.id)
        return to_view(saved)

    def update_status(self, mobile_number: str, user_status: CustomerStatus) -> CustomerResponse:
        customer = self._require_by_mobile(mobile_number)
        customer.user_status = user_status
        customer.updated_date = self.clock()
        saved = self.repository.save(customer)
        logger.info("Set status of customer %s to %s", saved.id, user_status.value)
        return to_view(saved)

    # Searches; an empty result is an empty list, never a failure
    def get_by_first_name(self, first_name: str) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_first_name(first_name))

    def get_by_last_name(self, last_name: str) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_last_name(last_name))

    def get_by_first_name_and_last_name(self, first_name: str, last_name: str) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_first_name_and_last_name(first_name, last_name))

    def get_by_first_name_or_last_name(self, first_name: str, last_name: str) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_first_name_or_last_name(first_name, last_name))

    def get_distinct_by_first_name_and_last_name(self, first_name: str, last_name: str) -> List[CustomerResponse]:
        return self._views(self.repository.find_distinct_by_first_name_and_last_name(first_name, last_name))

    def get_by_age_less_than(self, age: int) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_age_less_than(age))

    def get_by_age_less_than_equal(self, age: int) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_age_less_than_equal(age))

    def get_by_age_greater_than(self, age: int) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_age_greater_than(age))

    def get_by_age_greater_than_equal(self, age: int) -> List[CustomerResponse]:
        return self._views(self.repository.find_by_age_greater_than_equal(age))

    def get_by_start_date_between(self, start: date, end: date) -> List[CustomerResponse]:
        if start > end:
            raise CustomerValidationError(f"Start date {start.isoformat()} is after end date {end.isoformat()}")
        return self._views(self.repository.find_by_start_date_between(start, end))

    @staticmethod
    def _views(customers: List[Customer]) -> List[CustomerResponse]:
        return [to_view(customer) for customer in customers]
