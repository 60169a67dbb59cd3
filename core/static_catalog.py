"""
Built-in meals merged after the published recipes, so a fresh install
with an empty recipe collection can still produce a plan.
"""
from __future__ import annotations

from typing import Any, List

STATIC_MEALS: List[dict[str, Any]] = [
    # ── breakfast ───────────────────────────────────────────────────
    {
        "id": "b1", "name": "Avocado Toast with Eggs", "type": "breakfast",
        "calories": 420, "protein": 18, "carbs": 32, "fat": 26, "fiber": 8,
        "price": 4.50, "prepTime": 15, "tags": ["vegetarian", "high-protein"],
        "ingredients": [
            {"name": "Whole grain bread", "quantity": "2 slices", "price": 0.80},
            {"name": "Avocado", "quantity": "1/2", "price": 1.50},
            {"name": "Eggs", "quantity": "2", "price": 0.60},
            {"name": "Cherry tomatoes", "quantity": "50g", "price": 0.80},
            {"name": "Olive oil", "quantity": "1 tbsp", "price": 0.30},
        ],
    },
    {
        "id": "b2", "name": "Greek Yogurt Parfait", "type": "breakfast",
        "calories": 350, "protein": 20, "carbs": 45, "fat": 10, "fiber": 5,
        "price": 3.80, "prepTime": 5, "tags": ["vegetarian", "quick", "high-protein"],
        "ingredients": [
            {"name": "Greek yogurt", "quantity": "200g", "price": 1.50},
            {"name": "Granola", "quantity": "50g", "price": 0.80},
            {"name": "Mixed berries", "quantity": "100g", "price": 1.20},
            {"name": "Honey", "quantity": "1 tbsp", "price": 0.30},
        ],
    },
    {
        "id": "b3", "name": "Overnight Oats", "type": "breakfast",
        "calories": 380, "protein": 14, "carbs": 58, "fat": 12, "fiber": 10,
        "price": 2.50, "prepTime": 5, "tags": ["vegetarian", "vegan", "meal-prep"],
        "ingredients": [
            {"name": "Rolled oats", "quantity": "80g", "price": 0.40},
            {"name": "Almond milk", "quantity": "200ml", "price": 0.60},
            {"name": "Chia seeds", "quantity": "1 tbsp", "price": 0.40},
            {"name": "Banana", "quantity": "1", "price": 0.30},
            {"name": "Almond butter", "quantity": "1 tbsp", "price": 0.80},
        ],
    },
    {
        "id": "b4", "name": "Japanese Rice Bowl", "type": "breakfast",
        "calories": 450, "protein": 22, "carbs": 55, "fat": 15, "fiber": 4,
        "price": 5.20, "prepTime": 20, "tags": ["high-protein", "asian"],
        "ingredients": [
            {"name": "Japanese rice", "quantity": "150g", "price": 0.80},
            {"name": "Natto", "quantity": "50g", "price": 1.50},
            {"name": "Egg", "quantity": "1", "price": 0.30},
            {"name": "Nori", "quantity": "1 sheet", "price": 0.40},
            {"name": "Soy sauce", "quantity": "1 tbsp", "price": 0.20},
        ],
    },
    # ── lunch ───────────────────────────────────────────────────────
    {
        "id": "l1", "name": "Mediterranean Quinoa Bowl", "type": "lunch",
        "calories": 520, "protein": 22, "carbs": 58, "fat": 22, "fiber": 12,
        "price": 6.50, "prepTime": 25, "tags": ["vegetarian", "high-fiber"],
        "ingredients": [
            {"name": "Quinoa", "quantity": "100g", "price": 1.20},
            {"name": "Chickpeas", "quantity": "100g", "price": 0.80},
            {"name": "Cucumber", "quantity": "100g", "price": 0.50},
            {"name": "Feta cheese", "quantity": "50g", "price": 1.50},
            {"name": "Olives", "quantity": "30g", "price": 0.80},
            {"name": "Hummus", "quantity": "50g", "price": 1.00},
        ],
    },
    {
        "id": "l2", "name": "Grilled Chicken Salad", "type": "lunch",
        "calories": 450, "protein": 42, "carbs": 18, "fat": 24, "fiber": 6,
        "price": 7.80, "prepTime": 20, "tags": ["high-protein", "low-carb", "gluten-free"],
        "ingredients": [
            {"name": "Chicken breast", "quantity": "200g", "price": 3.50},
            {"name": "Mixed greens", "quantity": "100g", "price": 1.20},
            {"name": "Cherry tomatoes", "quantity": "80g", "price": 0.80},
            {"name": "Avocado", "quantity": "1/2", "price": 1.50},
            {"name": "Olive oil dressing", "quantity": "2 tbsp", "price": 0.80},
        ],
    },
    {
        "id": "l3", "name": "Miso Ramen Bowl", "type": "lunch",
        "calories": 580, "protein": 28, "carbs": 65, "fat": 22, "fiber": 6,
        "price": 8.50, "prepTime": 30, "tags": ["asian", "comfort-food"],
        "ingredients": [
            {"name": "Ramen noodles", "quantity": "200g", "price": 1.50},
            {"name": "Miso paste", "quantity": "2 tbsp", "price": 1.00},
            {"name": "Pork belly", "quantity": "100g", "price": 3.00},
            {"name": "Soft boiled egg", "quantity": "1", "price": 0.40},
            {"name": "Green onions", "quantity": "30g", "price": 0.30},
        ],
    },
    {
        "id": "l4", "name": "Lentil Soup with Bread", "type": "lunch",
        "calories": 420, "protein": 18, "carbs": 62, "fat": 10, "fiber": 15,
        "price": 4.20, "prepTime": 30, "tags": ["vegan", "high-fiber", "budget-friendly"],
        "ingredients": [
            {"name": "Red lentils", "quantity": "100g", "price": 0.80},
            {"name": "Carrots", "quantity": "100g", "price": 0.40},
            {"name": "Onion", "quantity": "1", "price": 0.30},
            {"name": "Vegetable broth", "quantity": "500ml", "price": 0.80},
            {"name": "Whole grain bread", "quantity": "2 slices", "price": 0.80},
        ],
    },
    # ── dinner ──────────────────────────────────────────────────────
    {
        "id": "d1", "name": "Salmon with Roasted Vegetables", "type": "dinner",
        "calories": 580, "protein": 45, "carbs": 28, "fat": 32, "fiber": 8,
        "price": 12.50, "prepTime": 35, "tags": ["high-protein", "omega-3", "gluten-free"],
        "ingredients": [
            {"name": "Salmon fillet", "quantity": "200g", "price": 7.00},
            {"name": "Sweet potato", "quantity": "150g", "price": 0.80},
            {"name": "Broccoli", "quantity": "150g", "price": 1.20},
            {"name": "Lemon", "quantity": "1", "price": 0.50},
            {"name": "Herbs & spices", "quantity": "mix", "price": 0.50},
        ],
    },
    {
        "id": "d2", "name": "Chicken Teriyaki Rice", "type": "dinner",
        "calories": 650, "protein": 40, "carbs": 70, "fat": 20, "fiber": 4,
        "price": 9.00, "prepTime": 30, "tags": ["high-protein", "asian"],
        "ingredients": [
            {"name": "Chicken thigh", "quantity": "200g", "price": 3.00},
            {"name": "Japanese rice", "quantity": "150g", "price": 0.80},
            {"name": "Teriyaki sauce", "quantity": "3 tbsp", "price": 1.20},
            {"name": "Broccoli", "quantity": "100g", "price": 0.80},
            {"name": "Sesame seeds", "quantity": "1 tbsp", "price": 0.30},
        ],
    },
    {
        "id": "d3", "name": "Buddha Bowl", "type": "dinner",
        "calories": 480, "protein": 20, "carbs": 55, "fat": 20, "fiber": 14,
        "price": 6.80, "prepTime": 30, "tags": ["vegan", "balanced", "colorful"],
        "ingredients": [
            {"name": "Brown rice", "quantity": "100g", "price": 0.60},
            {"name": "Edamame", "quantity": "80g", "price": 1.20},
            {"name": "Roasted chickpeas", "quantity": "80g", "price": 0.80},
            {"name": "Kale", "quantity": "100g", "price": 1.00},
            {"name": "Tahini dressing", "quantity": "2 tbsp", "price": 0.80},
        ],
    },
    {
        "id": "d4", "name": "Beef Stir Fry", "type": "dinner",
        "calories": 550, "protein": 38, "carbs": 45, "fat": 25, "fiber": 6,
        "price": 10.50, "prepTime": 25, "tags": ["high-protein", "asian", "quick"],
        "ingredients": [
            {"name": "Beef sirloin", "quantity": "200g", "price": 5.50},
            {"name": "Mixed vegetables", "quantity": "200g", "price": 1.50},
            {"name": "Jasmine rice", "quantity": "100g", "price": 0.60},
            {"name": "Soy sauce", "quantity": "2 tbsp", "price": 0.40},
            {"name": "Ginger & garlic", "quantity": "mix", "price": 0.50},
        ],
    },
    # ── snack ───────────────────────────────────────────────────────
    {
        "id": "s1", "name": "Trail Mix", "type": "snack",
        "calories": 180, "protein": 6, "carbs": 15, "fat": 12, "fiber": 3,
        "price": 2.00, "prepTime": 0, "tags": ["vegan", "portable", "energy"],
        "ingredients": [
            {"name": "Mixed nuts", "quantity": "30g", "price": 1.20},
            {"name": "Dried fruits", "quantity": "20g", "price": 0.60},
            {"name": "Dark chocolate chips", "quantity": "10g", "price": 0.20},
        ],
    },
    {
        "id": "s2", "name": "Apple with Almond Butter", "type": "snack",
        "calories": 220, "protein": 5, "carbs": 28, "fat": 12, "fiber": 5,
        "price": 1.80, "prepTime": 2, "tags": ["vegan", "quick", "satisfying"],
        "ingredients": [
            {"name": "Apple", "quantity": "1 medium", "price": 0.60},
            {"name": "Almond butter", "quantity": "2 tbsp", "price": 1.20},
        ],
    },
    {
        "id": "s3", "name": "Edamame", "type": "snack",
        "calories": 120, "protein": 11, "carbs": 10, "fat": 5, "fiber": 5,
        "price": 2.50, "prepTime": 5, "tags": ["vegan", "high-protein", "asian"],
        "ingredients": [
            {"name": "Edamame pods", "quantity": "150g", "price": 2.00},
            {"name": "Sea salt", "quantity": "1 tsp", "price": 0.10},
        ],
    },
]
