"""
Grouping of applied-fix messages by fix type.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .classifier import classify_fix
from .issue import FixGroup

logger = logging.getLogger(__name__)


def group_fixes_by_type(fixes: Optional[Iterable[Optional[str]]]) -> List[FixGroup]:
    """Group fix messages by label.

    Returns groups sorted by count (highest first), then label. Each group keeps
    the first message seen for its label as the sample.
    """
    if not fixes:
        return []

    groups: Dict[str, FixGroup] = {}
    for msg in fixes:
        label = classify_fix(msg)
        existing = groups.get(label)
        if existing:
            existing.count += 1
        else:
            groups[label] = FixGroup(type=label, count=1, sample=msg or "")

    result = sorted(groups.values(), key=lambda g: (-g.count, g.type))
    logger.debug("Grouped fixes into %d types", len(result))
    return result
