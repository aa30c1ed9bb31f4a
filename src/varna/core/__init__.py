"""Core analysis pipeline."""

from varna.core.pipeline import InvalidWordError, analyze_word, homorganic_verdict

__all__ = ["InvalidWordError", "analyze_word", "homorganic_verdict"]
