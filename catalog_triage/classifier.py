"""
Classification of free-text fix messages into fix-type labels.
"""

from typing import Optional, Tuple

FALLBACK_LABEL = "Other normalisation"

# Ordered decision list: the first rule with a matching keyword wins.
# Keyword sets overlap (e.g. "header name" vs "handle"), so order is significant.
FIX_RULES: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("shopify:", "header name", "template", "canonical", "canonicalized", "enforced"), "Header normalisation"),
    (("url handle", "handle"), "URL handle"),
    (("published", "charge tax", "requires shipping", "gift card"), "Boolean fields"),
    (("status", "visibility"), "Status / visibility"),
    (("price", "cost per item"), "Price fields"),
    (("inventory", "stock", "continue selling"), "Inventory"),
    (("option", "variant", "default title"), "Options / variants"),
    (("tag", "material", "categor", "image url"), "Tags / lists"),
    (("image",), "Images"),
    (("weight", "shipping", "fulfillment"), "Weight / shipping"),
    (("whitespace", "trimmed"), "Whitespace cleanup"),
    (("generated", "filled", "mapped"), "Generated / derived values"),
    (("cleaned", "normalized list", "normalised list"), "List cleanup"),
)

FIX_LABELS: Tuple[str, ...] = tuple(label for _, label in FIX_RULES) + (FALLBACK_LABEL,)


def classify_fix(message: Optional[str]) -> str:
    """Map one fix message to its fix-type label (case-insensitive substring match)."""
    m = (message or "").lower()
    if not m:
        return FALLBACK_LABEL
    for keywords, label in FIX_RULES:
        if any(k in m for k in keywords):
            return label
    return FALLBACK_LABEL
