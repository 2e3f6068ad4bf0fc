"""Food search with a local dataset and a cached remote fallback."""

import asyncio
import logging
import unicodedata
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field

from pydantic import ValidationError

from nutritrack.adapters.nutritionix_client import FoodLookupClient
from nutritrack.data.common_foods import COMMON_FOODS
from nutritrack.domain.foods import FoodItem
from nutritrack.rounding import round_half_up, round_half_up_int
from nutritrack.services.cache import Cache

_logger = logging.getLogger(__name__)


def scale_food_item(food: FoodItem, quantity: float) -> FoodItem:
    """Return ``food`` scaled to ``quantity`` servings.

    Calories are rounded to whole kcal, macros to one decimal.
    """
    if quantity <= 0:
        raise ValueError(f"quantity must be positive, got {quantity}")
    return food.model_copy(
        update={
            "serving_qty": food.serving_qty * quantity,
            "serving_weight_grams": food.serving_weight_grams * quantity,
            "nf_calories": round_half_up_int(food.nf_calories * quantity),
            "nf_total_fat": round_half_up(food.nf_total_fat * quantity, 1),
            "nf_total_carbohydrate": round_half_up(
                food.nf_total_carbohydrate * quantity, 1
            ),
            "nf_protein": round_half_up(food.nf_protein * quantity, 1),
        }
    )


def search_local_foods(
    query: str, foods: Iterable[FoodItem] = COMMON_FOODS
) -> list[FoodItem]:
    """Search foods by name ignoring case and accents.

    Names starting with the query come first, then exact matches, then
    alphabetical order.
    """
    term = normalize_food_name(query)
    if not term:
        return []
    matches = [food for food in foods if term in normalize_food_name(food.food_name)]

    def sort_key(food: FoodItem) -> tuple[bool, bool, str]:
        name = normalize_food_name(food.food_name)
        return (not name.startswith(term), name != term, name)

    return sorted(matches, key=sort_key)


def normalize_food_name(value: str) -> str:
    """Lowercase and strip combining accents."""
    decomposed = unicodedata.normalize("NFD", value.strip().lower())
    return "".join(char for char in decomposed if not unicodedata.combining(char))


@dataclass
class FoodSearchService:
    """Food lookups backed by the bundled dataset and a remote API."""

    client: FoodLookupClient
    cache: Cache
    local_foods: tuple[FoodItem, ...] = field(default=COMMON_FOODS)
    search_ttl_seconds: int = 3600
    nutrients_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 10) -> list[FoodItem]:
        """Return foods matching ``query``, local results first."""
        local = search_local_foods(query, self.local_foods)
        if local:
            _logger.debug("Local food search: query=%s results=%s", query, len(local))
            return local[:limit]
        if not query.strip():
            return []

        cache_key = f"foods:search:{normalize_food_name(query)}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached[:limit]

        try:
            payload = await self._call_with_retry(
                lambda: self.client.search_instant(query), action="search"
            )
        except Exception:
            _logger.exception("Remote food search failed", extra={"query": query})
            return []
        raw_foods = [*payload.get("common", []), *payload.get("branded", [])]
        foods = _parse_foods(raw_foods)
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        return foods[:limit]

    async def get_nutrition(self, food_name: str) -> FoodItem | None:
        """Return nutrition facts for a food name, or None if unknown."""
        local = search_local_foods(food_name, self.local_foods)
        if local:
            return local[0]
        if not food_name.strip():
            return None

        cache_key = f"foods:nutrients:{normalize_food_name(food_name)}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodItem):
            return cached

        try:
            payload = await self._call_with_retry(
                lambda: self.client.natural_nutrients(food_name), action="nutrients"
            )
        except Exception:
            _logger.exception(
                "Remote nutrient lookup failed", extra={"food_name": food_name}
            )
            return None
        foods = _parse_foods(payload.get("foods", []))
        if not foods:
            return None
        self.cache.set(cache_key, foods[0], ttl_seconds=self.nutrients_ttl_seconds)
        return foods[0]

    async def _call_with_retry(
        self, func: Callable[[], Awaitable[dict[str, object]]], *, action: str
    ) -> dict[str, object]:
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                _logger.warning(
                    "Food lookup %s failed (attempt %s/%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    exc,
                )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _parse_foods(raw_foods: Iterable[object]) -> list[FoodItem]:
    foods: list[FoodItem] = []
    for raw in raw_foods:
        if not isinstance(raw, dict):
            continue
        cleaned = {key: value for key, value in raw.items() if value is not None}
        try:
            foods.append(FoodItem.model_validate(cleaned))
        except ValidationError:
            _logger.warning("Skipping malformed food payload: %s", raw.get("food_name"))
    return foods
