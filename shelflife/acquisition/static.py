"""Offline data returned when every provider tier has failed."""

from __future__ import annotations

FALLBACK_SCANNED_ITEMS: list[dict] = [
    {"name": "Organic Bananas", "quantity": "1 bunch", "category": "Countertop",
     "estimatedExpiryDays": 5, "estimatedPrice": 2.99},
    {"name": "Avocados", "quantity": "3 units", "category": "Countertop",
     "estimatedExpiryDays": 4, "estimatedPrice": 4.50},
    {"name": "Sourdough Bread", "quantity": "1 loaf", "category": "Pantry",
     "estimatedExpiryDays": 5, "estimatedPrice": 5.49},
    {"name": "Cage-Free Eggs", "quantity": "12 count", "category": "Fridge",
     "estimatedExpiryDays": 21, "estimatedPrice": 6.99},
    {"name": "Almond Milk", "quantity": "1 carton", "category": "Fridge",
     "estimatedExpiryDays": 7, "estimatedPrice": 3.99},
    {"name": "Greek Yogurt", "quantity": "2 cups", "category": "Fridge",
     "estimatedExpiryDays": 14, "estimatedPrice": 1.50},
]

FALLBACK_RECIPES: list[dict] = [
    {
        "title": "Quick Pantry Pasta",
        "ingredients": ["Pasta", "Olive Oil", "Garlic", "Chili Flakes", "Parmesan"],
        "instructions": [
            "Boil pasta in salted water until al dente.",
            "Sauté sliced garlic and chili flakes in generous olive oil.",
            "Toss pasta with the oil, add some pasta water to emulsify.",
            "Serve topped with parmesan cheese.",
        ],
        "estimatedTime": "15 mins",
        "difficulty": "Easy",
        "youtubeSearchQuery": "aglio e olio pasta",
    },
    {
        "title": "Everything Fried Rice",
        "ingredients": ["Rice", "Eggs", "Soy Sauce", "Mixed Vegetables", "Onion"],
        "instructions": [
            "Sauté onions and any hard vegetables until soft.",
            "Push veggies to side, scramble eggs in the pan.",
            "Add cooked rice and soy sauce, mix everything together on high heat.",
            "Season with pepper and sesame oil if available.",
        ],
        "estimatedTime": "20 mins",
        "difficulty": "Easy",
        "youtubeSearchQuery": "easy fried rice",
    },
    {
        "title": "Classic Grilled Cheese & Tomato Soup",
        "ingredients": ["Bread", "Cheese", "Butter", "Tomato Soup (Canned or Fresh)"],
        "instructions": [
            "Butter bread slices on the outside.",
            "Place cheese between slices and grill in a pan until golden brown.",
            "Heat up tomato soup gently.",
            "Serve the crispy sandwich with soup for dipping.",
        ],
        "estimatedTime": "10 mins",
        "difficulty": "Easy",
        "youtubeSearchQuery": "grilled cheese and tomato soup",
    },
]
