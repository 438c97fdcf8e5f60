# vasstra/services/related_products.py
from vasstra.schemas.product import Product

# Score weights
SAME_CATEGORY = 50
SAME_SUBCATEGORY = 40
PRICE_BAND = 20
SAME_SEASON = 10
BESTSELLER = 5
NEW_ARRIVAL = 5

# ±20% around the reference price, bounds inclusive
PRICE_RANGE = 0.2


def _ids(product: Product) -> set:
    return {pid for pid in (product.mongo_id, product.id) if pid is not None}


def score_product(current: Product, candidate: Product) -> int:
    """
    Relevance of `candidate` for someone looking at `current`.
    """
    min_price = current.price * (1 - PRICE_RANGE)
    max_price = current.price * (1 + PRICE_RANGE)
    score = 0

    if candidate.category == current.category:
        score += SAME_CATEGORY

    if candidate.subcategory and candidate.subcategory == current.subcategory:
        score += SAME_SUBCATEGORY

    if min_price <= candidate.price <= max_price:
        score += PRICE_BAND

    if current.is_summer and candidate.is_summer:
        score += SAME_SEASON
    if current.is_winter and candidate.is_winter:
        score += SAME_SEASON

    if candidate.is_bestseller:
        score += BESTSELLER
    if candidate.is_new:
        score += NEW_ARRIVAL

    return score


def get_related_products(
    current: Product,
    products: list[Product],
    limit: int = 4,
) -> list[Product]:
    """
    Rank `products` against `current` and return at most `limit` of them.

    Steps:
      1. Drop the reference product itself (matched by _id or id).
      2. Score every remaining candidate, drop zero scores.
      3. Sort by score descending; ties keep pool order.
      4. If fewer than `limit` remain, pad with unselected candidates from
         the same category or flagged bestseller, in pool order.

    The result can be shorter than `limit` when the pool runs out; no
    placeholder entries are ever added.
    """
    current_ids = _ids(current)
    candidates = [
        p for p in products if p is not current and not (_ids(p) & current_ids)
    ]

    scored = [(p, score_product(current, p)) for p in candidates]
    scored = [(p, s) for p, s in scored if s > 0]
    scored.sort(key=lambda pair: pair[1], reverse=True)
    related = [p for p, _ in scored[:limit]]

    if len(related) >= limit:
        return related

    taken = set(current_ids)
    for p in related:
        taken |= _ids(p)

    fallback = [
        p
        for p in candidates
        if not (_ids(p) & taken)
        and all(p is not r for r in related)
        and (p.category == current.category or p.is_bestseller)
    ]
    return related + fallback[: limit - len(related)]
