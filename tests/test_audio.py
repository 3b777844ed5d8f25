import os
import sys
import time
from pathlib import Path
from unittest import mock

import pytest

from overengineered.audio import (
    Audio,
    AudioError,
    AudioState,
    InvalidFileError,
    NoToolError,
)


def _wait_for(predicate, timeout=10.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.02)
    return predicate()


@pytest.fixture
def marker_track(tmp_path):
    """A python script used as the 'track'; each run appends a line to a marker."""
    marker = tmp_path / "runs.txt"
    script = tmp_path / "track.py"
    script.write_text(
        f"with open({str(marker)!r}, 'a') as fh:\n    fh.write('run\\n')\n"
    )
    return script, marker


def test_fetch_tool_prefers_aplay():
    with mock.patch("overengineered.audio.shutil.which", side_effect=lambda n: f"/bin/{n}"):
        audio = Audio()
        assert audio.fetch_tool() == "/bin/aplay"
    assert audio.tool == "/bin/aplay"


def test_fetch_tool_falls_back_to_afplay():
    def which(name):
        return "/bin/afplay" if name == "afplay" else None

    with mock.patch("overengineered.audio.shutil.which", side_effect=which):
        audio = Audio()
        assert audio.fetch_tool() == "/bin/afplay"


def test_play_without_tool_raises(tmp_path):
    track = tmp_path / "a.wav"
    track.write_bytes(b"RIFF")
    with mock.patch("overengineered.audio.shutil.which", return_value=None):
        audio = Audio()
        with pytest.raises(NoToolError):
            audio.play(track)
    assert audio.status() is AudioState.STOPPED


def test_play_missing_file_raises(tmp_path):
    audio = Audio(tool=sys.executable)
    with pytest.raises(InvalidFileError):
        audio.play(tmp_path / "missing.wav")
    assert audio.status() is AudioState.STOPPED


def test_errors_share_a_base(tmp_path):
    audio = Audio(tool=sys.executable)
    with pytest.raises(AudioError):
        audio.play(tmp_path / "missing.wav")
    with mock.patch("overengineered.audio.shutil.which", return_value=None):
        track = tmp_path / "a.wav"
        track.write_bytes(b"RIFF")
        with pytest.raises(AudioError):
            Audio().play(track)


def test_given_tool_skips_lookup(marker_track):
    script, _ = marker_track
    with mock.patch("overengineered.audio.shutil.which") as which:
        with Audio(tool=sys.executable) as audio:
            audio.play(script)
            assert audio.status() is AudioState.PLAYING
    which.assert_not_called()


def test_initially_stopped():
    assert Audio(tool=sys.executable).status() is AudioState.STOPPED


def test_play_runs_and_loops_track(marker_track):
    script, marker = marker_track
    audio = Audio(tool=sys.executable)
    audio.play(script)
    try:
        assert audio.status() is AudioState.PLAYING
        looped = _wait_for(
            lambda: marker.exists() and len(marker.read_text().splitlines()) >= 2
        )
        assert looped
    finally:
        audio.stop()
    assert audio.status() is AudioState.STOPPED


def test_stop_when_idle_keeps_stopped():
    audio = Audio(tool=sys.executable)
    audio.stop()
    assert audio.status() is AudioState.STOPPED


def test_play_again_replaces_track(marker_track):
    script, _ = marker_track
    audio = Audio(tool=sys.executable)
    audio.play(script)
    audio.play(script)
    try:
        assert audio.status() is AudioState.PLAYING
    finally:
        audio.stop()
    assert audio.status() is AudioState.STOPPED


def test_context_manager_stops(marker_track):
    script, _ = marker_track
    with Audio(tool=sys.executable) as audio:
        audio.play(Path(os.fspath(script)))
    assert audio.status() is AudioState.STOPPED