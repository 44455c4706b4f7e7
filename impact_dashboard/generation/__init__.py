"""
Generation package for the Impact Dashboard.

Re-exports the builder, the synthesizer and the random source interface so
callers can import from `impact_dashboard.generation` directly.
"""

from impact_dashboard.generation.builder import DEFAULT_END, DEFAULT_START, build_dataset
from impact_dashboard.generation.random_source import RandomSource, make_random_source
from impact_dashboard.generation.synthesizer import synthesize

__all__ = [
    "DEFAULT_END",
    "DEFAULT_START",
    "RandomSource",
    "build_dataset",
    "make_random_source",
    "synthesize",
]
