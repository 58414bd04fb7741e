"""
Parameter derivation for slicing a click-track recording.
"""

import math
from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Tuple

from . import config
from .velocity import VelocityRange, velocity_ranges


@dataclass(frozen=True)
class SlicingParameters:
    """
    Immutable description of one slicing run.
    
    Timing values are derived from the tempo: every segment spans
    ``BEATS_PER_SEGMENT`` beats, the fade-out starts three quarters of the
    way through and runs to the end of the segment.
    """

    source_path: str
    bpm: float
    velocity_layers: int
    note_names: Tuple[str, ...]
    octave_start: int = config.DEFAULT_OCTAVE_START
    octave_end: int = config.DEFAULT_OCTAVE_END

    @property
    def segment_duration(self) -> float:
        return (config.SECONDS_PER_MINUTE / self.bpm) * config.BEATS_PER_SEGMENT

    @property
    def attack_duration(self) -> float:
        return config.ATTACK_DURATION_SEC

    @property
    def fade_out_start(self) -> float:
        return self.segment_duration * (1 - config.FADE_OUT_FRACTION)

    @property
    def fade_out_duration(self) -> float:
        return self.segment_duration * config.FADE_OUT_FRACTION

    @property
    def octaves(self) -> List[int]:
        """Octaves from start to end, inclusive. Empty if start > end."""
        return list(range(self.octave_start, self.octave_end + 1))

    @property
    def velocity_ranges(self) -> List[VelocityRange]:
        return velocity_ranges(self.velocity_layers)


def parse_note_names(text: str) -> Tuple[str, ...]:
    """Split a whitespace-separated note list, e.g. ``"a c ds fs"``."""
    return tuple(text.split())


def output_dir_for(source_path: str) -> Path:
    """Output directory named after the source file without its extension."""
    return Path(Path(source_path).stem)


def derive_parameters(
    source_path: str,
    bpm: float,
    velocity_layers: int,
    note_names: Sequence[str],
    octave_start: int = config.DEFAULT_OCTAVE_START,
    octave_end: int = config.DEFAULT_OCTAVE_END
) -> SlicingParameters:
    """
    Validate inputs and build the slicing parameters.
    
    Args:
        source_path: Path to the source recording
        bpm: Tempo of the click track
        velocity_layers: Number of velocity layers recorded
        note_names: Note names in recording order (tokens are used verbatim)
        octave_start: First octave recorded
        octave_end: Last octave recorded (inclusive)
        
    Returns:
        SlicingParameters for the run
        
    Raises:
        ValueError: If the tempo is not positive or the layer count is
            outside 1-128
    """
    if isinstance(note_names, str):
        note_names = parse_note_names(note_names)
    
    if not (bpm > 0 and math.isfinite(bpm)):
        raise ValueError(f"bpm must be a positive finite number, got {bpm}")
    
    if velocity_layers < 1 or velocity_layers > config.MAX_VELOCITY_LAYERS:
        raise ValueError(
            f"velocity layers must be between 1 and {config.MAX_VELOCITY_LAYERS}, "
            f"got {velocity_layers}"
        )
    
    return SlicingParameters(
        source_path=str(source_path),
        bpm=float(bpm),
        velocity_layers=int(velocity_layers),
        note_names=tuple(note_names),
        octave_start=int(octave_start),
        octave_end=int(octave_end),
    )
