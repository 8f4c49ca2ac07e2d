"""
Collaborators around the simulation core: clocks, the tick timer, audio
cue sinks and renderers.
"""

from .audio import AudioCueSink, LoggingAudioSink, NullAudioSink, RecordingAudioSink
from .clock import SimulatedClock, SystemClock
from .renderer import ConsoleRenderer, NullRenderer, Renderer
from .tick_timer import TickTimer

__all__ = [
    'AudioCueSink', 'LoggingAudioSink', 'NullAudioSink', 'RecordingAudioSink',
    'SimulatedClock', 'SystemClock',
    'ConsoleRenderer', 'NullRenderer', 'Renderer',
    'TickTimer',
]
