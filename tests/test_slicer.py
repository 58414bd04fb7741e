import json

import pytest

from sample_slicer import audio_snippets
from sample_slicer.parameters import derive_parameters
from sample_slicer.slicer import slice_recording


@pytest.fixture
def bells():
    return derive_parameters("bells.wav", 60, 1, "c d e fs gs as", 3, 6)


def test_slices_every_segment(bells, fake_ffmpeg, tmp_path):
    out = tmp_path / "bells"
    report = slice_recording(bells, output_dir=out, verbose=False)

    assert report.extracted == 24
    assert report.failed == []
    assert len(fake_ffmpeg.calls) == 24
    assert len(list(out.glob("*.mp3"))) == 24
    assert json.loads((out / "index.json").read_text())["velocityRanges"] == ["0-127"]


def test_calls_are_sequential_in_recording_order(bells, fake_ffmpeg, tmp_path):
    slice_recording(bells, output_dir=tmp_path, verbose=False)
    starts = [float(cmd[cmd.index("-ss") + 1]) for cmd in fake_ffmpeg.calls]
    assert starts == [k * 4.0 for k in range(24)]


def test_failures_do_not_stop_the_loop(bells, fake_ffmpeg, tmp_path):
    fake_ffmpeg.fail_outputs.update({"c3_v0-127.mp3", "as6_v0-127.mp3"})
    report = slice_recording(bells, output_dir=tmp_path, verbose=False)

    assert report.extracted == 24
    assert [s.filename for s in report.failed] == ["c3_v0-127.mp3", "as6_v0-127.mp3"]
    assert len(fake_ffmpeg.calls) == 24
    assert (tmp_path / "index.json").exists()


def test_missing_ffmpeg_still_writes_index(bells, monkeypatch, tmp_path):
    def missing(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(audio_snippets.subprocess, "run", missing)
    report = slice_recording(bells, output_dir=tmp_path, verbose=False)
    assert len(report.failed) == 24
    assert report.index_path.exists()


def test_rerun_overwrites_existing_output(bells, fake_ffmpeg, tmp_path):
    slice_recording(bells, output_dir=tmp_path, verbose=False)
    report = slice_recording(bells, output_dir=tmp_path, verbose=False)
    assert report.extracted == 24
    assert len(fake_ffmpeg.calls) == 48
    assert len(list(tmp_path.glob("*.mp3"))) == 24


def test_progress_output(bells, fake_ffmpeg, tmp_path, capsys):
    out = tmp_path / "bells"
    slice_recording(bells, output_dir=out)
    lines = capsys.readouterr().out.splitlines()

    assert lines[0] == f"Extracting {out}/c3_v0-127.mp3 (segment 1/24, start: 0.0s)"
    assert lines[23] == f"Extracting {out}/as6_v0-127.mp3 (segment 24/24, start: 92.0s)"
    assert lines[24] == ""
    assert lines[25] == f"Done! Extracted 24 samples to {out}/"
    assert lines[26] == f"Generated {out}/index.json"


def test_start_time_rounded_to_millis(fake_ffmpeg, tmp_path, capsys):
    params = derive_parameters("piano.mp3", 70, 1, "a", 0, 1)
    slice_recording(params, output_dir=tmp_path)
    lines = capsys.readouterr().out.splitlines()
    # 240/70 = 3.428571...
    assert lines[1].endswith("(segment 2/2, start: 3.429s)")


def test_dry_run_skips_ffmpeg(bells, monkeypatch, tmp_path, capsys):
    def forbidden(cmd, **kwargs):
        raise AssertionError("ffmpeg must not run")

    monkeypatch.setattr(audio_snippets.subprocess, "run", forbidden)
    report = slice_recording(bells, output_dir=tmp_path, dry_run=True)

    assert report.failed == []
    assert (tmp_path / "index.json").exists()
    out = capsys.readouterr().out
    assert "ffmpeg -y -ss 0.0 -i bells.wav -t 4.0" in out


def test_quiet_prints_nothing(bells, fake_ffmpeg, tmp_path, capsys):
    slice_recording(bells, output_dir=tmp_path, verbose=False)
    assert capsys.readouterr().out == ""


def test_metadata_table(bells, fake_ffmpeg, tmp_path):
    fake_ffmpeg.fail_outputs.add("d3_v0-127.mp3")
    report = slice_recording(bells, output_dir=tmp_path, write_metadata=True, verbose=False)
    assert report.metadata_path == tmp_path / "segments.csv"
    rows = report.metadata_path.read_text().splitlines()
    assert len(rows) == 25
    assert rows[2].startswith("1,d3_v0-127.mp3,d,3,0,127,4.0,4.0,False")


def test_creates_nested_output_dir(bells, fake_ffmpeg, tmp_path):
    out = tmp_path / "samples" / "bells"
    slice_recording(bells, output_dir=out, verbose=False)
    assert (out / "index.json").exists()
