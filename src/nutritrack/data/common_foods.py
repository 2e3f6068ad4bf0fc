"""Bundled fallback dataset of common foods.

Searched before the remote food lookup so that everyday foods resolve
without a network call.
"""

from nutritrack.domain.foods import FoodItem, FoodPhoto

_THUMB_URL = "https://nix-tag-images.s3.amazonaws.com/{}_thumb.jpg"

# name, serving qty, serving unit, serving grams, kcal, fat, carbs, protein, thumb
_ROWS: tuple[tuple[str, float, str, float, float, float, float, float, int], ...] = (
    ("Oeuf", 1, "unité", 50, 70, 5, 0.5, 6, 542),
    ("Oeufs", 1, "unité", 50, 70, 5, 0.5, 6, 542),
    ("Patate douce", 1, "moyenne", 130, 112, 0.1, 26, 2, 417),
    ("Blanc de poulet", 100, "g", 100, 120, 1.5, 0, 26, 7),
    ("Poulet", 100, "g", 100, 165, 3.6, 0, 31, 7),
    ("Steak haché", 100, "g", 100, 141, 5, 0, 21, 867),
    ("Steak", 100, "g", 100, 141, 5, 0, 21, 867),
    ("Boeuf haché", 100, "g", 100, 141, 5, 0, 21, 867),
    ("Jambon", 1, "tranche", 30, 35, 1, 0.5, 6, 783),
    ("Pain", 1, "tranche", 30, 75, 1, 15, 2, 225),
    ("Riz", 100, "g cuit", 100, 130, 0.3, 28, 2.7, 1378),
    ("Pomme", 1, "moyenne", 182, 95, 0.3, 25, 0.5, 384),
    ("Salade", 100, "g", 100, 15, 0.2, 2.9, 1.4, 8),
    ("Courgette", 100, "g", 100, 17, 0.3, 3.1, 1.2, 524),
    ("Concombre", 100, "g", 100, 15, 0.1, 3.6, 0.7, 513),
    ("Galette de maïs", 1, "galette", 30, 110, 1.5, 23, 2, 814),
    ("Galette de blé complet", 1, "galette", 35, 95, 1, 16, 3, 1130),
    ("Tomate", 1, "moyenne", 123, 22, 0.2, 4.8, 1.1, 436),
    ("Carotte", 1, "moyenne", 61, 25, 0.1, 5.8, 0.6, 516),
    ("Brocoli", 100, "g", 100, 34, 0.4, 6.6, 2.8, 520),
    ("Avocat", 1, "moyen", 150, 240, 22, 12.8, 3, 441),
    ("Yaourt nature", 1, "pot", 125, 59, 0.2, 5.7, 5.3, 690),
    ("Lentilles", 100, "g cuites", 100, 116, 0.4, 20, 9, 683),
    ("Quinoa", 100, "g cuit", 100, 120, 1.9, 21.3, 4.4, 787),
    ("Poisson blanc", 100, "g", 100, 96, 2.3, 0, 20.5, 1038),
    ("Saumon", 100, "g", 100, 206, 12.4, 0, 22.1, 1590),
    ("Lait", 100, "ml", 100, 60, 3.2, 4.8, 3.2, 554),
    ("Yaourt", 125, "g", 125, 75, 3, 6, 5, 558),
    ("Pâtes", 100, "g cuites", 100, 158, 0.9, 31, 5.8, 193),
    ("Banane", 1, "moyenne", 118, 105, 0.4, 27, 1.3, 399),
    ("Fromage", 30, "g", 30, 120, 10, 0.5, 7, 512),
    ("Thon", 100, "g", 100, 108, 0.8, 0, 25, 1001),
    ("Huile d'olive", 1, "cuillère", 14, 120, 14, 0, 0, 661),
    ("Huile", 1, "cuillère", 14, 120, 14, 0, 0, 501),
    ("Beurre", 1, "cuillère", 14, 100, 11, 0, 0, 501),
    ("Pomme de terre", 1, "moyenne", 150, 130, 0.2, 30, 3, 503),
    ("Pommes de terre", 1, "moyenne", 150, 130, 0.2, 30, 3, 416),
    ("Haricots verts", 100, "g cuits", 100, 35, 0.1, 7, 1.9, 448),
    ("Amandes", 30, "g", 30, 173, 15, 6.1, 6.3, 529),
)

COMMON_FOODS: tuple[FoodItem, ...] = tuple(
    FoodItem(
        food_name=name,
        serving_qty=qty,
        serving_unit=unit,
        serving_weight_grams=grams,
        nf_calories=calories,
        nf_total_fat=fat,
        nf_total_carbohydrate=carbs,
        nf_protein=protein,
        photo=FoodPhoto(thumb=_THUMB_URL.format(thumb)),
    )
    for name, qty, unit, grams, calories, fat, carbs, protein, thumb in _ROWS
)
