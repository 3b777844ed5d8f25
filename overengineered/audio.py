"""Looping background music played through the system's command-line player."""

from __future__ import annotations

import os
import shutil
import signal
import subprocess
import threading
from enum import Enum, auto

# Players tried in order: ALSA's player on Linux, then the Darwin one.
_TOOLS = ("aplay", "afplay")
# How often the player loop checks whether the track has to be restarted.
_TICK = 1 / 30
# Marks a lookup that found no player.
_NO_TOOL = ""


class AudioState(Enum):
    """Whether a track is being played."""

    PLAYING = auto()
    STOPPED = auto()


class AudioError(Exception):
    """A track could not be played."""


class NoToolError(AudioError):
    """No command-line audio player is available on this system."""


class InvalidFileError(AudioError):
    """The track to play cannot be read."""


class Audio:
    """Plays one wav file at a time, looping it until stopped.

    The player runs in a background thread that restarts the system tool
    whenever the track ends, so ``play`` never blocks.
    """

    def __init__(self, tool: str | None = None):
        # None means the system has not been searched for a player yet.
        self.tool = tool
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None

    def fetch_tool(self) -> str | None:
        """Search the PATH for a player and remember it.

        Returns the player's path, or None when there is none.
        """
        for name in _TOOLS:
            path = shutil.which(name)
            if path:
                self.tool = path
                return path
        self.tool = _NO_TOOL
        return None

    def play(self, path: str | os.PathLike[str]) -> None:
        """Start looping the wav file at ``path``, replacing any current track."""
        if self.tool is None:
            self.fetch_tool()
        if not self.tool:
            raise NoToolError("no audio player found (looked for aplay and afplay)")
        path = os.fspath(path)
        if not os.path.isfile(path) or not os.access(path, os.R_OK):
            raise InvalidFileError(f"cannot read audio file: {path}")

        if self.status() is AudioState.PLAYING:
            self.stop()

        stop_event = threading.Event()
        thread = threading.Thread(
            target=self._loop, args=(self.tool, path, stop_event), daemon=True
        )
        try:
            thread.start()
        except RuntimeError as err:
            raise AudioError("could not start the player thread") from err
        self._stop_event = stop_event
        self._thread = thread

    def status(self) -> AudioState:
        if self._stop_event is not None and not self._stop_event.is_set():
            return AudioState.PLAYING
        return AudioState.STOPPED

    def stop(self) -> None:
        """Stop the current track at once; does nothing when nothing plays."""
        if self.status() is not AudioState.PLAYING:
            return
        assert self._stop_event is not None and self._thread is not None
        self._stop_event.set()
        self._thread.join()
        self._stop_event = None
        self._thread = None

    def __enter__(self) -> Audio:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @staticmethod
    def _loop(tool: str, path: str, stop_event: threading.Event) -> None:
        process: subprocess.Popen[bytes] | None = None
        try:
            while not stop_event.wait(_TICK):
                if process is None or process.poll() is not None:
                    try:
                        process = subprocess.Popen(
                            [tool, path],
                            stdin=subprocess.DEVNULL,
                            stdout=subprocess.DEVNULL,
                            stderr=subprocess.DEVNULL,
                        )
                    except OSError:
                        process = None
                        return
        finally:
            if process is not None and process.poll() is None:
                _interrupt(process)


def _interrupt(process: subprocess.Popen[bytes]) -> None:
    sigint = getattr(signal, "SIGINT", None)
    try:
        if sigint is not None and os.name == "posix":
            process.send_signal(sigint)
        else:
            process.terminate()
        process.wait(timeout=1)
    except subprocess.TimeoutExpired:
        process.kill()
        process.wait()
    except OSError:
        pass