"""
Configuration settings for the click-track sample slicer.
"""

# Recording convention
BEATS_PER_SEGMENT = 4  # One sustained note per 4 beats of the click track
SECONDS_PER_MINUTE = 60.0

# Envelope settings
ATTACK_DURATION_SEC = 0.05  # Linear fade-in at the start of every sample
FADE_OUT_FRACTION = 0.25  # Fade-out covers the last quarter of the segment

# Octave defaults
DEFAULT_OCTAVE_START = 0
DEFAULT_OCTAVE_END = 6

# MIDI velocity bounds
VELOCITY_MIN = 0
VELOCITY_MAX = 127
MAX_VELOCITY_LAYERS = 128

# Output settings
OUTPUT_EXTENSION = "mp3"  # Fixed regardless of source extension
INDEX_FILENAME = "index.json"
METADATA_FILENAME = "segments.csv"

# File naming template for samples
SAMPLE_NAME_TEMPLATE = "{note}{octave}_{velocity}.{ext}"

# External tool settings
FFMPEG_BINARY = "ffmpeg"
FFMPEG_AUDIO_QUALITY = "2"  # LAME VBR quality for -q:a
