from __future__ import annotations

import logging
import os

from core.models import BoundaryRule

logger = logging.getLogger(__name__)

DEFAULT_BOUNDARY_RULE = BoundaryRule.INCLUSIVE


def load_boundary_rule() -> BoundaryRule:
    """Sweep tie-break for tasks sharing a boundary day (``PM_LOAD_BOUNDARY_RULE``)."""
    raw = (os.getenv("PM_LOAD_BOUNDARY_RULE") or DEFAULT_BOUNDARY_RULE.value).strip().lower()
    try:
        return BoundaryRule(raw)
    except ValueError:
        logger.warning(
            "Unknown PM_LOAD_BOUNDARY_RULE %r, using %s.", raw, DEFAULT_BOUNDARY_RULE.value
        )
        return DEFAULT_BOUNDARY_RULE


__all__ = ["DEFAULT_BOUNDARY_RULE", "load_boundary_rule"]
