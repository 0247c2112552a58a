from .base import BaseBot, BotAction, apply_action
from .greedy import GreedyBot

__all__ = ["BaseBot", "BotAction", "GreedyBot", "apply_action"]
