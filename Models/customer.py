# Models/customer.py
import enum
from sqlalchemy import Column, String, Integer, Date, DateTime, Enum
from .base import Base

class CustomerStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"

class Customer(Base):
    __tablename__ = 'customers'

    # Primary identifier, assigned by the store on insert
    id = Column(String, primary_key=True, index=True)

    # Unique keys
    user_name = Column(String, unique=True, nullable=False, index=True)
    customer_mobile_number = Column(String, unique=True, nullable=False, index=True)
    customer_email_address = Column(String, unique=True, nullable=False, index=True)

    # Personal information
    first_name = Column(String, nullable=True, index=True)
    last_name = Column(String, nullable=True, index=True)
    customer_age = Column(Integer, nullable=True)
    customer_address = Column(String, nullable=True)
    start_date = Column(Date, nullable=True)

    # Account status
    user_status = Column(Enum(CustomerStatus), nullable=False, default=CustomerStatus.ACTIVE)

    # Write-only, hashed
    password = Column(String, nullable=False)

    # Timestamps, stamped by the service
    created_date = Column(DateTime, nullable=False)
    updated_date = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Customer {self.user_name} ({self.customer_mobile_number})>"
