from datetime import datetime

from Models import CustomerStatus
from Services.customer_mapper import to_record, to_view
from Services.customer_schemas import CustomerRequest
from Services.passwords import verify_password
from tests.fixtures_data import AAKIF_PAYLOAD, AIYAN_PAYLOAD

NOW = datetime(2026, 1, 1, 9, 30, 0)


def test_to_record_sets_defaults_and_timestamps():
    record = to_record(CustomerRequest(**AIYAN_PAYLOAD), NOW)

    assert record.user_name == "Aiyan"
    assert record.customer_age == 2
    assert record.customer_mobile_number == "0987654321"
    assert record.user_status == CustomerStatus.ACTIVE
    assert record.created_date == NOW
    assert record.updated_date == NOW
    assert record.id is None


def test_to_record_generates_hashed_secret():
    first = to_record(CustomerRequest(**AIYAN_PAYLOAD), NOW)
    second = to_record(CustomerRequest(**AIYAN_PAYLOAD), NOW)

    assert first.password
    assert first.password != second.password
    assert not verify_password("", first.password)


def test_to_view_excludes_password():
    record = to_record(CustomerRequest(**AAKIF_PAYLOAD), NOW)
    record.id = "customer-1"

    view = to_view(record)
    body = view.model_dump(by_alias=True)

    assert "password" not in body
    assert body["customerId"] == "customer-1"
    assert body["userStatus"] == CustomerStatus.ACTIVE
    assert body["startDate"].isoformat() == "2024-03-15"
    assert body["createdDate"] == body["updatedDate"] == NOW
