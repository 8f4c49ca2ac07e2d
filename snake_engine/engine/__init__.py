"""
Simulation core: spawner, effect manager, speed controller, tick engine
and the session controller that drives them.
"""

from .effect_manager import EffectManager
from .session import GameSession
from .spawner import Spawner
from .speed import base_interval, speed
from .tick import EngineStateError, TickEngine, TickResult

__all__ = [
    'EffectManager',
    'GameSession',
    'Spawner',
    'base_interval',
    'speed',
    'EngineStateError',
    'TickEngine',
    'TickResult',
]
