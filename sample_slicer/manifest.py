"""
Index and metadata writers for a sliced sample set.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Tuple

import pandas as pd

from . import config
from .parameters import SlicingParameters
from .segments import Segment


def index_notes(params: SlicingParameters) -> List[str]:
    """
    List every note identifier, note name outer and octave inner.
    
    This lookup order differs from the recording order used for slicing.
    """
    return [f"{note}{octave}" for note in params.note_names for octave in params.octaves]


def build_index(params: SlicingParameters) -> Dict[str, List[str]]:
    """
    Build the sample set index.
    
    Args:
        params: Slicing parameters
        
    Returns:
        Dictionary with ``notes`` and ``velocityRanges`` lists
    """
    return {
        "notes": index_notes(params),
        "velocityRanges": [v.label for v in params.velocity_ranges],
    }


def write_index(params: SlicingParameters, output_dir: Path) -> Path:
    """
    Write index.json into the output directory, replacing any existing one.
    
    Args:
        params: Slicing parameters
        output_dir: Sample set directory
        
    Returns:
        Path to the written index file
    """
    index_path = Path(output_dir) / config.INDEX_FILENAME
    
    with open(index_path, "w", encoding="utf-8") as f:
        json.dump(build_index(params), f, indent=2, ensure_ascii=False)
    
    return index_path


def write_segment_metadata(
    results: Iterable[Tuple[Segment, bool]],
    output_dir: Path
) -> Path:
    """
    Save per-segment metadata as CSV.
    
    Args:
        results: (segment, success) pairs in extraction order
        output_dir: Sample set directory
        
    Returns:
        Path to the written CSV file
    """
    records = []
    
    for segment, success in results:
        records.append({
            "segment_index": segment.index,
            "filename": segment.filename,
            "note": segment.note,
            "octave": segment.octave,
            "velocity_low": segment.velocity_range.low,
            "velocity_high": segment.velocity_range.high,
            "start_sec": segment.start_time,
            "duration_sec": segment.duration,
            "success": success,
        })
    
    columns = [
        "segment_index", "filename", "note", "octave", "velocity_low",
        "velocity_high", "start_sec", "duration_sec", "success",
    ]
    df = pd.DataFrame(records, columns=columns)
    
    csv_path = Path(output_dir) / config.METADATA_FILENAME
    df.to_csv(csv_path, index=False)
    
    return csv_path
