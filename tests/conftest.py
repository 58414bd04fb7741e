import subprocess
from pathlib import Path

import pytest

from sample_slicer import audio_snippets


class FakeFfmpeg:
    """Records ffmpeg invocations and touches the output file."""

    def __init__(self):
        self.calls = []
        self.fail_outputs = set()

    def __call__(self, cmd, **kwargs):
        self.calls.append(list(cmd))
        output = Path(cmd[-1])
        if output.name in self.fail_outputs:
            return subprocess.CompletedProcess(cmd, 1)
        output.write_bytes(b"")
        return subprocess.CompletedProcess(cmd, 0)


@pytest.fixture
def fake_ffmpeg(monkeypatch):
    fake = FakeFfmpeg()
    monkeypatch.setattr(audio_snippets.subprocess, "run", fake)
    return fake
