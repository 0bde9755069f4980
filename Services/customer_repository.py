# Services/customer_repository.py
from sqlalchemy import and_, exc, or_
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date
import uuid
from Models import Customer


class CustomerRepository:
    """
    Data access for the customers table.

    Finders return ORM rows; uniqueness of userName, mobile number and email
    is enforced by the table's unique indexes, so ``insert`` and ``save`` may
    raise ``sqlalchemy.exc.IntegrityError`` after rolling the session back.
    """

    def __init__(self, db: Session):
        self.db = db

    def insert(self, customer: Customer) -> Customer:
        if not customer.id:
            customer.id = str(uuid.uuid4())
        self.db.add(customer)
        return self._commit(customer)

    def save(self, customer: Customer) -> Customer:
        return self._commit(customer)

    def _commit(self, customer: Customer) -> Customer:
        try:
            self.db.commit()
        except exc.IntegrityError:
            self.db.rollback()
            raise
        self.db.refresh(customer)
        return customer

    # Single-row lookups on the unique keys
    def find_by_mobile_number(self, mobile_number: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.customer_mobile_number == mobile_number).first()

    def find_by_user_name(self, user_name: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.user_name == user_name).first()

    def find_by_email_address(self, email_address: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.customer_email_address == email_address).first()

    def exists_by_user_name(self, user_name: str) -> bool:
        return self._exists(Customer.user_name == user_name)

    def exists_by_email_address(self, email_address: str) -> bool:
        return self._exists(Customer.customer_email_address == email_address)

    def exists_by_mobile_number(self, mobile_number: str) -> bool:
        return self._exists(Customer.customer_mobile_number == mobile_number)

    def _exists(self, criterion) -> bool:
        return self.db.query(self.db.query(Customer).filter(criterion).exists()).scalar()

    def find_all(self) -> List[Customer]:
        return self.db.query(Customer).all()

    # Predicate finders
    def find_by_first_name(self, first_name: str) -> List[Customer]:
        return self.db.query(Customer).filter(Customer.first_name == first_name).all()

    def find_by_last_name(self, last_name: str) -> List[Customer]:
        return self.db.query(Customer).filter(Customer.last_name == last_name).all()

    def find_by_first_name_and_last_name(self, first_name: str, last_name: str) -> List[Customer]:
        return self.db.query(Customer).filter(
            and_(Customer.first_name == first_name, Customer.last_name == last_name)
        ).all()

    def find_by_first_name_or_last_name(self, first_name: str, last_name: str) -> List[Customer]:
        return self.db.query(Customer).filter(
            or_(Customer.first_name == first_name, Customer.last_name == last_name)
        ).all()

    def find_distinct_by_first_name_and_last_name(self, first_name: str, last_name: str) -> List[Customer]:
        return self.db.query(Customer).filter(
            and_(Customer.first_name == first_name, Customer.last_name == last_name)
        ).distinct().all()

    def find_by_age_less_than(self, age: int) -> List[Customer]:
        return self.db.query(Customer).filter(Customer.customer_age < age).all()

    def find_by_age_less_than_equal(self, age: int) -> List[Customer]:
        return self.db.query(Customer).filter(Customer.customer_age <= age).all()

    def find_by_age_greater_than(self, age: int) -> List[Customer]:
        return self.db.query(Customer).filter(Customer.customer_age > age).all()

    def find_by_age_greater_than_equal(self, age: int) -> List[Customer]:
        return self.db.query(Customer).filter(Customer.customer_age >= age).all()

    def find_by_start_date_between(self, start: date, end: date) -> List[Customer]:
        # BETWEEN is inclusive on both ends
        return self.db.query(Customer).filter(Customer.start_date.between(start, end)).all()
