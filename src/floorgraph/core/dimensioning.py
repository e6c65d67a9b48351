"""Formatting of lengths for display.

Plan coordinates are centimetres; the display unit comes from the
``dimUnit`` configuration key unless one is passed explicitly.
"""

from __future__ import annotations

import math
from typing import Optional

from .configuration import (
    CONFIG_DIM_UNIT,
    DIM_CENTIMETER,
    DIM_INCH,
    DIM_MILLIMETER,
    Configuration,
)


def cm_to_measure(cm: float, unit: Optional[str] = None) -> str:
    """Convert centimetres to a dimension string.

    Args:
        cm: Length in centimetres.
        unit: One of ``inch``, ``m``, ``cm``, ``mm``; defaults to the
            configured unit. Unknown units fall back to metres.

    Returns:
        Human-readable length, e.g. ``3'3"`` or ``1.0 m``.
    """
    if unit is None:
        unit = Configuration.get_string_value(CONFIG_DIM_UNIT)

    if unit == DIM_INCH:
        real_feet = (cm * 0.393700) / 12
        feet = math.floor(real_feet)
        inches = round((real_feet - feet) * 12)
        return f"{feet}'{inches}\""
    if unit == DIM_MILLIMETER:
        return f"{round(10 * cm)} mm"
    if unit == DIM_CENTIMETER:
        return f"{round(10 * cm) / 10} cm"
    return f"{round(10 * cm) / 1000} m"
