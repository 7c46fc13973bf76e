from __future__ import annotations

from decimal import Decimal

from foodorder.application.ports.repositories import MenuRepository
from foodorder.domain.common.money import Money
from foodorder.domain.menu.entities import FoodItem

SAMPLE_MENU = [
    {
        "name": "Pizza Margherita",
        "description": "Classic cheese pizza with tomato sauce and mozzarella",
        "price": "12.99",
        "category": "Italian",
    },
    {
        "name": "Cheeseburger",
        "description": "Beef patty with cheese, lettuce, tomato, and special sauce",
        "price": "9.99",
        "category": "American",
    },
    {
        "name": "Sushi Platter",
        "description": "Assorted sushi pieces with salmon, tuna, and California rolls",
        "price": "18.99",
        "category": "Japanese",
    },
    {
        "name": "Caesar Salad",
        "description": "Fresh romaine lettuce with grilled chicken, croutons, and parmesan",
        "price": "8.99",
        "category": "Salads",
    },
    {
        "name": "Spaghetti Carbonara",
        "description": "Classic pasta with bacon, eggs, and parmesan cheese",
        "price": "14.99",
        "category": "Italian",
    },
    {
        "name": "Vanilla Ice Cream",
        "description": "Homemade vanilla ice cream with chocolate sauce",
        "price": "5.99",
        "category": "Desserts",
    },
]


def seed_sample_menu(repository: MenuRepository) -> list[FoodItem]:
    seeded: list[FoodItem] = []
    for entry in SAMPLE_MENU:
        item = FoodItem(
            item_id=repository.next_id(),
            name=entry["name"],
            description=entry["description"],
            category=entry["category"],
            price=Money.from_decimal(Decimal(entry["price"])),
        )
        repository.add(item)
        seeded.append(item)
    return seeded
