"""
Velocity range partitioning for multi-layer sample sets.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from . import config


@dataclass(frozen=True)
class VelocityRange:
    """Inclusive MIDI velocity bucket covered by one recorded layer."""

    low: int
    high: int

    @property
    def label(self) -> str:
        """Range label as used in the index, e.g. ``"0-42"``."""
        return f"{self.low}-{self.high}"

    @property
    def tag(self) -> str:
        """Range tag as used in filenames, e.g. ``"v0-42"``."""
        return f"v{self.label}"


def _round_half_up(value: float) -> int:
    # Halves round away from zero, matching the documented layer boundaries
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def velocity_ranges(layers: int) -> List[VelocityRange]:
    """
    Evenly divide the 0-127 velocity range into layers.
    
    Each bound is computed independently from the layer index, so for
    non-integral step sizes neighbouring ranges are not derived from each
    other. The last range always ends at 127.
    
    Args:
        layers: Number of velocity layers (1-128)
        
    Returns:
        List of velocity ranges in ascending order
    """
    if layers < 1 or layers > config.MAX_VELOCITY_LAYERS:
        raise ValueError(
            f"velocity layers must be between 1 and {config.MAX_VELOCITY_LAYERS}, got {layers}"
        )
    
    step = float(config.VELOCITY_MAX + 1) / layers
    ranges = []
    
    for i in range(layers):
        low = _round_half_up(i * step)
        high = _round_half_up((i + 1) * step - 1)
        
        # Ensure last range ends at 127
        if i == layers - 1:
            high = config.VELOCITY_MAX
        
        ranges.append(VelocityRange(low=low, high=high))
    
    return ranges
