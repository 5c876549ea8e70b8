"""
Gameplay package - the simulation core.
NO UI DEPENDENCIES.
"""
from cannon_coins.gameplay.game import Game, GamePhase
from cannon_coins.gameplay.scheduler import Scheduler, TaskHandle
from cannon_coins.gameplay.state import GameState

__all__ = ["Game", "GamePhase", "GameState", "Scheduler", "TaskHandle"]
