"""Configuration tree."""

from ncclpy.tree.pair import TOP_LEVEL_KEY, MergePolicy, Pair
from ncclpy.tree.scalar import Converter, convert_scalar, parse_bool, parse_number

__all__ = [
    "TOP_LEVEL_KEY",
    "Converter",
    "MergePolicy",
    "Pair",
    "convert_scalar",
    "parse_bool",
    "parse_number",
]
