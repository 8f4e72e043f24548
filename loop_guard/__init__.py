"""
loop-guard
==========
Iteration-count guard rail for ``loop`` / ``while`` blocks: raise once a
loop runs more times than it ever should.
"""

from .guard import DEFAULT_MESSAGE, IterationLimitExceeded, LoopGuard, LoopGuardConfig

__all__ = ["LoopGuard", "LoopGuardConfig", "IterationLimitExceeded", "DEFAULT_MESSAGE"]
__version__ = "1.0.0"
