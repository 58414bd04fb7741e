"""
Main slicing module that orchestrates segment extraction and index generation.
"""

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from . import config
from .audio_snippets import build_trim_command, extract_segment
from .manifest import write_index, write_segment_metadata
from .parameters import SlicingParameters, output_dir_for
from .segments import Segment, count_segments, enumerate_segments


@dataclass
class SliceReport:
    """Outcome of a slicing run."""

    output_dir: Path
    extracted: int = 0
    failed: List[Segment] = field(default_factory=list)
    index_path: Optional[Path] = None
    metadata_path: Optional[Path] = None


def slice_recording(
    params: SlicingParameters,
    output_dir: Optional[Path] = None,
    ffmpeg: str = config.FFMPEG_BINARY,
    dry_run: bool = False,
    write_metadata: bool = False,
    verbose: bool = True
) -> SliceReport:
    """
    Slice the source recording into one sample file per segment.
    
    Segments are extracted one at a time in recording order. A failed
    extraction is recorded in the report but never stops the loop, and the
    index is written once every segment has been attempted.
    
    Args:
        params: Slicing parameters
        output_dir: Destination directory (defaults to the source file's stem)
        ffmpeg: ffmpeg executable
        dry_run: Print the commands instead of running them
        write_metadata: Also save a per-segment CSV table
        verbose: Whether to print progress information
        
    Returns:
        SliceReport describing the run
    """
    if output_dir is None:
        output_dir = output_dir_for(params.source_path)
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    
    report = SliceReport(output_dir=output_dir)
    total = count_segments(params)
    results = []
    
    for segment in tqdm(
        enumerate_segments(params),
        total=total,
        disable=not verbose,
        desc="Extracting samples",
        unit="sample"
    ):
        output_path = output_dir / segment.filename
        
        if verbose:
            tqdm.write(
                f"Extracting {output_path} "
                f"(segment {segment.index + 1}/{total}, start: {round(segment.start_time, 3)}s)"
            )
        
        if dry_run:
            if verbose:
                cmd = build_trim_command(params, segment, output_path, ffmpeg=ffmpeg)
                tqdm.write(f"  {shlex.join(cmd)}")
            success = True
        else:
            success = extract_segment(params, segment, output_path, ffmpeg=ffmpeg)
        
        if not success:
            report.failed.append(segment)
        
        results.append((segment, success))
        report.extracted += 1
    
    if verbose:
        print(f"\nDone! Extracted {report.extracted} samples to {output_dir}/")
    
    report.index_path = write_index(params, output_dir)
    if verbose:
        print(f"Generated {report.index_path}")
    
    if write_metadata:
        report.metadata_path = write_segment_metadata(results, output_dir)
        if verbose:
            print(f"Saved metadata: {report.metadata_path}")
    
    return report
