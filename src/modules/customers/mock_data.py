"""Records loaded into the customer list when ``SEED_MOCK_DATA`` is on."""

CUSTOMERS = [
    {
        "id": "c-001",
        "name": "Ana",
        "surname": "Souza",
        "email": "ana.souza@example.com",
        "phone": "+1 555 0100",
        "address": {
            "street": "742 Evergreen Terrace",
            "city": "Springfield",
            "state": "OR",
            "zip": "97403",
            "country": "US",
        },
    },
    {
        "id": "c-002",
        "name": "Bruno",
        "surname": "Lima",
        "email": "bruno.lima@example.com",
        "address": {
            "street": "221B Baker Street",
            "city": "London",
            "zip": "NW1 6XE",
            "country": "GB",
        },
    },
    {
        "id": "c-003",
        "name": "Carla",
        "surname": "Mendes",
        "address": {
            "street": "Avenida Corrientes 1234",
            "city": "Buenos Aires",
            "zip": "C1043",
            "country": "AR",
        },
    },
]
