from __future__ import annotations

from typing import Optional

from core.services.workload.units import normalize_capacity


def rescale_units_for_replacement(
    units: Optional[float],
    current_max_units: Optional[float],
    new_max_units: Optional[float],
    keep_percentages: bool = True,
) -> float:
    """Units an assignment should carry after moving to another resource.

    ``units`` and both capacities may be coefficients or legacy percentages.
    With ``keep_percentages`` the units keep the same share of capacity
    (scaled by new/old capacity); otherwise they are kept as-is. Either way
    the result never exceeds the new resource's capacity. A resource with no
    capacity has no share to keep, so any positive units move at the full new
    capacity.
    """
    value = normalize_capacity(units)
    current_cap = normalize_capacity(current_max_units)
    new_cap = normalize_capacity(new_max_units)

    if not keep_percentages:
        return min(value, new_cap)
    if current_cap <= 0:
        return new_cap if value > 0 else 0.0
    return min(value * (new_cap / current_cap), new_cap)


__all__ = ["rescale_units_for_replacement"]
