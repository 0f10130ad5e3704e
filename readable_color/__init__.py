# readable_color/__init__.py
"""
readable_color package.

Purpose:
  Pick a foreground colour that stays readable on top of a sampled background,
  using the W3C brightness / colour difference heuristic. See find_readable.py for CLI.

Public API:
  find_first_readable_color : sample a surface region, then search for a readable colour.
  find_readable_color       : search from an explicit background colour.
  match_readable_color      : same search, returning a MatchResult (readable flag, diffs).
  Color, Region             : value objects (core_types).
  MatchStrategy             : candidate stepping strategies.
  InvalidBackgroundContent  : raised when a region cannot be sampled.
  scoring                   : darkness_score, contrast_difference, is_readable.
  sampler                   : region averaging.
  utils                     : formatting and logging helpers.

Quick start:
  from readable_color import Color, find_readable_color
  find_readable_color(Color.from_hex("#ffffff")).to_hex()
"""

__version__ = "0.1.0"

# Re-export namespaces for convenience.
from . import constants
from . import core_types
from . import scoring
from . import strategy
from . import sampler
from . import image_io
from . import utils

from .api import find_first_readable_color, match_first_readable_color
from .core_types import BLACK, WHITE, Color, Region
from .errors import InvalidBackgroundContent
from .matcher import MatchResult, find_readable_color, match_readable_color
from .scoring import contrast_difference, darkness_score, is_readable
from .strategy import MatchStrategy

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "scoring",
    "strategy",
    "sampler",
    "image_io",
    "utils",
    "find_first_readable_color",
    "match_first_readable_color",
    "find_readable_color",
    "match_readable_color",
    "MatchResult",
    "MatchStrategy",
    "Color",
    "Region",
    "BLACK",
    "WHITE",
    "InvalidBackgroundContent",
    "darkness_score",
    "contrast_difference",
    "is_readable",
]
