"""
Audio cue sinks.

The engine only emits opaque cue tags; playing them is up to the sink.
Sinks may fail or be missing without affecting the simulation.
"""

import logging
from typing import List

logger = logging.getLogger(__name__)


class AudioCueSink:
    """Base interface: receive a cue tag such as 'eat' or 'gameOver'."""

    def play(self, cue: str) -> None:
        raise NotImplementedError


class NullAudioSink(AudioCueSink):
    def play(self, cue: str) -> None:
        return None


class LoggingAudioSink(AudioCueSink):
    """Writes cues to the log; handy for headless runs."""

    def play(self, cue: str) -> None:
        logger.info(f"♪ {cue}")


class RecordingAudioSink(AudioCueSink):
    """Keeps every cue in order."""

    def __init__(self):
        self.cues: List[str] = []

    def play(self, cue: str) -> None:
        self.cues.append(cue)
