"""
Main entry point for slicing a click-track recording into a sample set.

Assumes the recording was played against a click track with one sustained
note per 4 beats, cycling through the notes low-to-high inside each octave
and through the octaves inside each velocity layer.
"""

import argparse
from pathlib import Path
import sys

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from sample_slicer import config
from sample_slicer.audio_snippets import check_source_duration, require_ffmpeg
from sample_slicer.parameters import derive_parameters, parse_note_names
from sample_slicer.segments import get_segment_statistics
from sample_slicer.slicer import slice_recording


USAGE = """Usage: slice-samples <input_file> <bpm> <velocity_layers> <notes> [octave_start] [octave_end]

  input_file:      audio file to slice
  bpm:             tempo (determines segment length: 4 beats)
  velocity_layers: number of velocity layers
  notes:           space-separated notes in quotes, e.g., 'a c ds fs'
  octave_start:    starting octave (default: 0)
  octave_end:      ending octave (default: 6)

Example: slice-samples piano_felt.mp3 50 3 'a c ds fs' 0 6"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="slice-samples",
        description="Slice a click-track recording into note/velocity samples",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Minor-third sampling, octaves 0-6, 3 velocity layers, 50 BPM (84 samples)
  slice-samples piano_felt.mp3 50 3 'a c ds fs' 0 6

  # Full diatonic sampling, octaves 2-5, 5 velocity layers, 30 BPM (140 samples)
  slice-samples strings.mp3 30 5 'a b c d e f g' 2 5

  # Report failed extractions and exit non-zero
  slice-samples bells.wav 60 1 'c d e fs gs as' 3 6 --strict
        """
    )
    
    parser.add_argument("input_file", nargs="?", help="Audio file to slice")
    parser.add_argument("bpm", nargs="?", help="Tempo of the recording")
    parser.add_argument("velocity_layers", nargs="?", help="Number of velocity layers")
    parser.add_argument("notes", nargs="?", help="Space-separated note names in quotes")
    parser.add_argument(
        "octave_start",
        nargs="?",
        default=config.DEFAULT_OCTAVE_START,
        help="Starting octave"
    )
    parser.add_argument(
        "octave_end",
        nargs="?",
        default=config.DEFAULT_OCTAVE_END,
        help="Ending octave"
    )
    
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Report segments whose extraction failed and exit with status 1"
    )
    
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the ffmpeg commands without running them"
    )
    
    parser.add_argument(
        "--metadata",
        action="store_true",
        help=f"Also write {config.METADATA_FILENAME} with one row per segment"
    )
    
    parser.add_argument(
        "--check-duration",
        action="store_true",
        help="Warn if the recording is shorter than all segments together"
    )
    
    parser.add_argument(
        "--ffmpeg",
        default=config.FFMPEG_BINARY,
        help="ffmpeg executable"
    )
    
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output"
    )
    
    return parser


def _convert(parser, value, type_, name):
    """Convert a positional argument, reporting bad values the way argparse does."""
    try:
        return type_(value)
    except ValueError:
        parser.error(f"argument {name}: invalid {type_.__name__} value: {value!r}")


def main(argv=None):
    """Main function to parse command-line arguments and slice the recording."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    # Positionals stay strings until the argument count has been checked
    if args.notes is None:
        print(USAGE)
        sys.exit(1)
    
    bpm = _convert(parser, args.bpm, float, "bpm")
    velocity_layers = _convert(parser, args.velocity_layers, int, "velocity_layers")
    octave_start = _convert(parser, args.octave_start, int, "octave_start")
    octave_end = _convert(parser, args.octave_end, int, "octave_end")
    
    verbose = not args.quiet
    
    try:
        params = derive_parameters(
            args.input_file,
            bpm,
            velocity_layers,
            parse_note_names(args.notes),
            octave_start,
            octave_end
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    
    if args.strict and not args.dry_run:
        require_ffmpeg(args.ffmpeg)
    
    if args.check_duration:
        check_source_duration(params, verbose=verbose)
    
    try:
        report = slice_recording(
            params,
            ffmpeg=args.ffmpeg,
            dry_run=args.dry_run,
            write_metadata=args.metadata,
            verbose=verbose
        )
    except Exception as e:
        print(f"\n✗ Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
    
    if args.strict and report.failed:
        stats = get_segment_statistics(params)
        print(f"\nWarning: {len(report.failed)} of {stats['total_segments']} segments failed:")
        for segment in report.failed:
            print(f"  {report.output_dir / segment.filename} (segment {segment.index + 1})")
        sys.exit(1)


if __name__ == "__main__":
    main()
