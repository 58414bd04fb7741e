"""
Audio snippet extraction through an external ffmpeg process.
"""

import shutil
import subprocess
from pathlib import Path
from typing import List, Optional

import librosa

from . import config
from .parameters import SlicingParameters
from .segments import Segment, count_segments


def build_fade_filter(params: SlicingParameters) -> str:
    """
    Build the ffmpeg audio filter for attack fade-in and tail fade-out.
    
    Both fades are linear; times are relative to the start of the
    extracted sample.
    """
    return (
        f"afade=t=in:st=0:d={params.attack_duration},"
        f"afade=t=out:st={params.fade_out_start}:d={params.fade_out_duration}"
    )


def build_trim_command(
    params: SlicingParameters,
    segment: Segment,
    output_path: Path,
    ffmpeg: str = config.FFMPEG_BINARY
) -> List[str]:
    """
    Build the ffmpeg command line that extracts one segment.
    
    Args:
        params: Slicing parameters
        segment: Segment to extract
        output_path: Destination file path
        ffmpeg: ffmpeg executable
        
    Returns:
        Argument list suitable for subprocess.run
    """
    return [
        ffmpeg, "-y",
        "-ss", str(segment.start_time),
        "-i", str(params.source_path),
        "-t", str(segment.duration),
        "-af", build_fade_filter(params),
        "-q:a", config.FFMPEG_AUDIO_QUALITY,
        str(output_path),
    ]


def extract_segment(
    params: SlicingParameters,
    segment: Segment,
    output_path: Path,
    ffmpeg: str = config.FFMPEG_BINARY
) -> bool:
    """
    Trim one segment out of the source recording and apply the fades.
    
    The ffmpeg process is awaited synchronously with its output discarded.
    A failed or unlaunchable process does not raise; the caller decides
    whether a failure matters.
    
    Args:
        params: Slicing parameters
        segment: Segment to extract
        output_path: Destination file path
        ffmpeg: ffmpeg executable
        
    Returns:
        True if ffmpeg exited successfully, False otherwise
    """
    cmd = build_trim_command(params, segment, output_path, ffmpeg=ffmpeg)
    
    try:
        result = subprocess.run(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL
        )
    except OSError:
        return False
    
    return result.returncode == 0


def require_ffmpeg(ffmpeg: str = config.FFMPEG_BINARY) -> None:
    if shutil.which(ffmpeg) is None:
        raise SystemExit(f"{ffmpeg} is required but not found in PATH")


def get_source_duration(source_path: str) -> Optional[float]:
    """
    Read the duration of the source recording in seconds.
    
    Args:
        source_path: Path to the source audio file
        
    Returns:
        Duration in seconds, or None if the file could not be read
    """
    try:
        return librosa.get_duration(path=str(source_path))
    except Exception as e:
        print(f"Warning: Could not get duration for {source_path}: {e}")
        return None


def check_source_duration(params: SlicingParameters, verbose: bool = True) -> bool:
    """
    Check that the recording is long enough for every segment.
    
    Args:
        params: Slicing parameters
        verbose: Whether to print a warning for short recordings
        
    Returns:
        True if the recording covers all segments or its length is unknown
    """
    duration = get_source_duration(params.source_path)
    if duration is None:
        return True
    
    required = count_segments(params) * params.segment_duration
    
    if duration < required:
        if verbose:
            print(
                f"Warning: {params.source_path} is {duration:.3f}s long, "
                f"but {required:.3f}s are needed for {count_segments(params)} segments"
            )
        return False
    
    return True
