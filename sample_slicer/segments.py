"""
Segment enumeration: maps each (velocity, octave, note) to its slice of the recording.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator

from . import config
from .parameters import SlicingParameters
from .velocity import VelocityRange


@dataclass(frozen=True)
class Segment:
    """One fixed-length slice of the source recording holding a single note."""

    index: int
    velocity_range: VelocityRange
    octave: int
    note: str
    start_time: float
    duration: float

    @property
    def filename(self) -> str:
        return generate_sample_filename(self.note, self.octave, self.velocity_range)


def generate_sample_filename(
    note: str,
    octave: int,
    velocity_range: VelocityRange,
    extension: str = config.OUTPUT_EXTENSION
) -> str:
    """
    Generate standardized filename for a sample.
    
    Args:
        note: Note name token, used verbatim
        octave: Octave number
        velocity_range: Velocity range the sample belongs to
        extension: Output file extension
        
    Returns:
        Filename such as ``a0_v0-42.mp3``
    """
    return config.SAMPLE_NAME_TEMPLATE.format(
        note=note,
        octave=octave,
        velocity=velocity_range.tag,
        ext=extension
    )


def count_segments(params: SlicingParameters) -> int:
    """Total number of segments: notes x octaves x velocity layers."""
    return len(params.note_names) * len(params.octaves) * params.velocity_layers


def enumerate_segments(params: SlicingParameters) -> Iterator[Segment]:
    """
    Yield segments in recording order.
    
    The recording cycles notes low-to-high inside each octave, octaves
    inside each velocity layer, so velocity is the outer loop and note the
    inner one. Segment ``k`` starts at ``k * segment_duration``.
    
    Args:
        params: Slicing parameters
        
    Yields:
        Segment objects with dense zero-based indices
    """
    duration = params.segment_duration
    segment_index = 0
    
    for velocity_range in params.velocity_ranges:
        for octave in params.octaves:
            for note in params.note_names:
                yield Segment(
                    index=segment_index,
                    velocity_range=velocity_range,
                    octave=octave,
                    note=note,
                    start_time=segment_index * duration,
                    duration=duration,
                )
                segment_index += 1


def get_segment_statistics(params: SlicingParameters) -> Dict[str, Any]:
    """
    Summarize the segment layout of a run.
    
    Args:
        params: Slicing parameters
        
    Returns:
        Dictionary with counts and the total recording length required
    """
    total = count_segments(params)
    
    return {
        "total_segments": total,
        "notes": len(params.note_names),
        "octaves": len(params.octaves),
        "velocity_layers": params.velocity_layers,
        "segment_duration_sec": params.segment_duration,
        "required_duration_sec": total * params.segment_duration,
    }
