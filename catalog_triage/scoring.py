"""
Weighted validation score per category, plus short per-category notes.

Every category starts at 100 and loses a fixed penalty per issue depending on
severity. The overall score is the weighted average of the category scores.
A file is ready for import when the overall score is at least 90 and there
are no blocking errors.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .issue import Issue, Severity
from .readiness import is_error
from .registry import default_registry

CATEGORIES = ("structure", "variant", "pricing", "inventory", "seo", "images")

CATEGORY_LABELS = {
    "structure": "Structure",
    "variant": "Variants",
    "pricing": "Pricing",
    "inventory": "Inventory",
    "seo": "SEO",
    "images": "Images",
}

# Images has no weight; image problems still surface through blocking counts.
CATEGORY_WEIGHTS = {
    "structure": 25,
    "variant": 25,
    "pricing": 20,
    "inventory": 20,
    "seo": 10,
    "images": 0,
}

SEVERITY_PENALTY = {
    Severity.ERROR: 6.0,
    Severity.WARNING: 2.0,
    Severity.INFO: 0.5,
}

# Registry categories outside the six scored buckets.
CATEGORY_ALIASES = {
    "handle": "variant",
    "sku": "variant",
    "attributes": "variant",
    "media": "images",
}

READY_SCORE = 90
READY_LABEL = "Ready for import"
NOT_READY_LABEL = "Not ready yet"


@dataclass
class ValidationBreakdown:
    """Overall and per-category scores with severity counts."""
    score: int
    categories: Dict[str, int]
    errors: int = 0
    warnings: int = 0
    infos: int = 0
    blocking_errors: int = 0
    ready: bool = False
    label: str = NOT_READY_LABEL


@dataclass
class ScoreNote:
    key: str
    label: str
    score: int
    note: str


@dataclass
class _NoteCounts:
    blocking: int = 0
    errors: int = 0
    warnings: int = 0


def _round(n: float) -> int:
    # half-up, so 92.5 scores 93
    return int(math.floor(n + 0.5))


def _clamp(n: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, n))


def _severity(value: Any) -> Severity:
    if isinstance(value, Severity):
        return value
    try:
        return Severity(value)
    except ValueError:
        return Severity.INFO


def infer_category(column: Optional[str]) -> str:
    """Guess a scoring category from the column name when no metadata exists."""
    col = (column or "").lower()
    if any(k in col for k in ("image", "img", "alt")):
        return "images"
    if any(k in col for k in ("price", "compare", "cost", "tax", "currency")):
        return "pricing"
    if any(k in col for k in ("inventory", "qty", "quantity", "policy")):
        return "inventory"
    if any(k in col for k in ("option", "variant", "sku", "handle")):
        return "variant"
    if any(k in col for k in ("seo", "title", "body", "description")):
        return "seo"
    return "structure"


def score_category(category: Optional[str]) -> str:
    """Map a registry category onto one of the scored categories."""
    if category in CATEGORIES:
        return category
    return CATEGORY_ALIASES.get(category or "", "structure")


def _is_blocking(meta) -> bool:
    return True if meta is None or meta.blocking is None else meta.blocking


def compute_validation_breakdown(
    issues: Optional[Iterable[Issue]],
    format_id: Optional[str] = None,
    registry: Any = None,
) -> ValidationBreakdown:
    """Score issues per category and decide import readiness."""
    if registry is None:
        registry = default_registry
    penalties = {cat: 0.0 for cat in CATEGORIES}
    errors = warnings = infos = blocking_errors = 0

    for issue in issues or ():
        severity = _severity(getattr(issue, "severity", None))
        if severity is Severity.ERROR:
            errors += 1
        elif severity is Severity.WARNING:
            warnings += 1
        else:
            infos += 1

        meta = registry.lookup(format_id, getattr(issue, "code", None))
        if meta is not None and meta.category:
            category = score_category(meta.category)
        else:
            category = infer_category(getattr(issue, "column", ""))
        penalties[category] += SEVERITY_PENALTY[severity]

        if severity is Severity.ERROR and _is_blocking(meta):
            blocking_errors += 1

    categories = {cat: _clamp(_round(100 - penalties[cat]), 0, 100) for cat in CATEGORIES}
    weighted = sum(categories[cat] * CATEGORY_WEIGHTS[cat] for cat in CATEGORIES)
    score = _clamp(_round(weighted / 100), 0, 100)
    ready = score >= READY_SCORE and blocking_errors == 0

    return ValidationBreakdown(
        score=score,
        categories=categories,
        errors=errors,
        warnings=warnings,
        infos=infos,
        blocking_errors=blocking_errors,
        ready=ready,
        label=READY_LABEL if ready else NOT_READY_LABEL,
    )


def build_score_notes(
    breakdown: ValidationBreakdown,
    issues: Optional[Iterable[Issue]],
    format_id: Optional[str] = None,
    registry: Any = None,
) -> List[ScoreNote]:
    """One short note per category, e.g. "2 blocking, 1 warnings"."""
    if registry is None:
        registry = default_registry
    counts = {cat: _NoteCounts() for cat in CATEGORIES}

    for issue in issues or ():
        meta = registry.lookup(format_id, getattr(issue, "code", None))
        c = counts[score_category(meta.category if meta is not None else None)]
        severity = getattr(issue, "severity", None)
        if is_error(severity):
            c.errors += 1
            if _is_blocking(meta):
                c.blocking += 1
        elif _severity(severity) is Severity.WARNING:
            c.warnings += 1

    notes = []
    for key in CATEGORIES:
        c = counts[key]
        parts = []
        if c.blocking:
            parts.append(f"{c.blocking} blocking")
        if c.errors and not c.blocking:
            parts.append(f"{c.errors} errors")
        if c.warnings:
            parts.append(f"{c.warnings} warnings")
        notes.append(
            ScoreNote(
                key=key,
                label=CATEGORY_LABELS[key],
                score=breakdown.categories.get(key, 0),
                note=", ".join(parts) if parts else "No issues detected",
            )
        )
    return notes
