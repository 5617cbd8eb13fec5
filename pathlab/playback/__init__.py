"""
Playback module.

Consumes finished algorithm runs:
- Playback: Cursor over a step trace, yielding highlight frames
- PlaybackFrame: Highlight state at one step
- compare_algorithms: Run several algorithms side by side
- RunSummary: Headline numbers for one run
"""

from pathlab.playback.compare import RunSummary, compare_algorithms, summarize
from pathlab.playback.replay import Playback, PlaybackFrame

__all__ = [
    "Playback",
    "PlaybackFrame",
    "RunSummary",
    "compare_algorithms",
    "summarize",
]
