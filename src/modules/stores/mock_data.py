"""Records loaded into the store list when ``SEED_MOCK_DATA`` is on."""

STORES = [
    {
        "id": "s-001",
        "name": "Downtown",
        "phone": "+1 555 0199",
        "address": {
            "street": "350 Fifth Avenue",
            "city": "New York",
            "state": "NY",
            "zip": "10118",
            "country": "US",
        },
    },
    {
        "id": "s-002",
        "name": "Riverside",
        "address": {
            "street": "Calle de Alcala 42",
            "city": "Madrid",
            "zip": "28014",
            "country": "ES",
        },
    },
]
