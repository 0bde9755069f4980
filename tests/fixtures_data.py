"""Reusable payloads for the customer test scenarios."""

AIYAN_PAYLOAD = {
    "userName": "Aiyan",
    "firstName": "Aiyan",
    "lastName": "Khan",
    "customerAge": 2,
    "customerMobileNumber": "0987654321",
    "customerEmailAddress": "aiyan@mail.com",
    "customerAddress": "town",
}

AAKIF_PAYLOAD = {
    "userName": "Aakif",
    "firstName": "Aakif",
    "lastName": "Khan",
    "customerAge": 30,
    "customerMobileNumber": "1234567890",
    "customerEmailAddress": "aakif@mail.com",
    "customerAddress": "Main Street",
    "startDate": "2024-03-15",
}

HAYATH_PAYLOAD = {
    "userName": "Hayath",
    "firstName": "Hayathulla",
    "lastName": "Shaik",
    "customerAge": 24,
    "customerMobileNumber": "6304474604",
    "customerEmailAddress": "hayath@mail.com",
    "customerAddress": "Main Street",
    "startDate": "2024-06-01",
}


def payload(base, **overrides):
    data = dict(base)
    data.update(overrides)
    return data
