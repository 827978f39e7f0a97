"""
gridSOM - A flat rectangular Self-Organizing Map trained with online Kohonen learning.
"""
from .errors import InvalidArgumentError
from .vector import Vector, distance_squared
from .node import MapNode
from .initializer import MapInitializer
from .trainer import MapTrainer
from .som import Initializer, Map, Trainer

__version__ = "0.1.0"

__all__ = [
    "InvalidArgumentError",
    "Vector",
    "distance_squared",
    "MapNode",
    "MapInitializer",
    "MapTrainer",
    "Initializer",
    "Trainer",
    "Map",
]
