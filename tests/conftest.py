"""Shared fixtures for gift allocation tests."""

import pytest

from gift_allocation.models import Catalog, Child, Gift


@pytest.fixture()
def sample_catalog():
    """Mixed catalog with a young adult, a score tie and contested stock."""
    children = [
        Child(id=1, age=10, average_score=8.0, assigned_budget=20, gifts_preferences=["toy", "book"]),
        Child(id=2, age=7, average_score=9.5, assigned_budget=30, gifts_preferences=["book", "toy"]),
        Child(id=3, age=12, average_score=9.5, assigned_budget=12, gifts_preferences=["toy", "sport"]),
        Child(id=4, age=19, average_score=10.0, assigned_budget=100, gifts_preferences=["toy"]),
    ]
    gifts = [
        Gift(id="car", category="toy-car", price=15, quantity=1),
        Gift(id="blocks", category="toy", price=8, quantity=2),
        Gift(id="atlas", category="book", price=12, quantity=1),
        Gift(id="ball", category="sport", price=5, quantity=3),
    ]
    return Catalog(children=children, gifts=gifts)


@pytest.fixture()
def sample_event():
    """Pipeline-shaped event with incoming field names."""
    return {
        "children": [
            {
                "id": 1,
                "lastName": "Doe",
                "firstName": "Ann",
                "age": 10,
                "city": "Bucharest",
                "averageScore": 8.0,
                "assignedBudget": 20,
                "giftsPreferences": ["toy"],
            },
            {
                "id": 2,
                "lastName": "Doe",
                "firstName": "Ben",
                "age": 10,
                "city": "Bucharest",
                "averageScore": 9.0,
                "assignedBudget": 20,
                "giftsPreferences": ["toy"],
            },
            {
                "id": 3,
                "lastName": "Roe",
                "firstName": "Cal",
                "age": 21,
                "city": "Iasi",
                "averageScore": 10.0,
                "assignedBudget": 50,
                "giftsPreferences": ["toy"],
            },
        ],
        "gifts": [
            {"productName": "car", "category": "toy-car", "price": 15, "quantity": 1},
        ],
    }
