"""
Application use cases orchestrating the morphology domain against its ports.
"""

from lexmorph.core.use_cases.make_morph import MakeMorph
from lexmorph.core.use_cases.match_morphs import MatchMorphs

__all__ = ["MakeMorph", "MatchMorphs"]
