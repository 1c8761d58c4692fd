"""Seed input module."""

from ..waypoints import MalformedSeedError
from .loader import load_seed_file, parse_seed, save_seed_file
from .schema import validate_seed

__all__ = [
    "MalformedSeedError",
    "load_seed_file",
    "parse_seed",
    "save_seed_file",
    "validate_seed",
]
