"""Records loaded into the employee list when ``SEED_MOCK_DATA`` is on."""

EMPLOYEES = [
    {
        "id": "e-001",
        "name": "Daniel",
        "surname": "Costa",
        "position": "Store Manager",
        "email": "daniel.costa@example.com",
        "address": {
            "street": "1600 Amphitheatre Parkway",
            "city": "Mountain View",
            "state": "CA",
            "zip": "94043",
            "country": "US",
        },
    },
    {
        "id": "e-002",
        "name": "Fernanda",
        "surname": "Rocha",
        "position": "Cashier",
        "address": {
            "street": "Rua Augusta 500",
            "city": "Sao Paulo",
            "state": "SP",
            "zip": "01305-000",
            "country": "BR",
        },
    },
]
