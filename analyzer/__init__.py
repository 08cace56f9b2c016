"""Analyzer package for descriptive statistics and extractive summaries of text.

Modules:
- clean.py: Heuristic removal of code-like content, as composable stages.
- stats.py: Character/word/paragraph counts, longest word, top words, reading time.
- summarize.py: Naive extractive summary from the first qualifying sentences.
- model.py: Result data structures.
- config.py: Tunable constants and settings loading.
- source.py: Reading and validating plain-text uploads.
"""

from .config import AnalyzerSettings, load_settings
from .model import AnalysisResult, WordCount
from .stats import analyze
from .summarize import summarize

__all__ = [
	"AnalysisResult",
	"AnalyzerSettings",
	"WordCount",
	"analyze",
	"load_settings",
	"summarize",
]
