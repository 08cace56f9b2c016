from __future__ import annotations

import logging
import math
import re
from typing import Dict, List, Optional

from .clean import clean_for_analysis
from .config import DEFAULT_SETTINGS, AnalyzerSettings
from .model import AnalysisResult, WordCount


logger = logging.getLogger(__name__)

PARAGRAPH_SPLIT_RE = re.compile(r"\r\n\r\n|\r\r|\n\n")


def tokenize(cleaned: str) -> List[str]:
	return [word for word in cleaned.split() if word]


def count_paragraphs(text: str) -> int:
	"""Blocks separated by blank lines, ignoring empty ones. Never below 1."""
	blocks = [p for p in PARAGRAPH_SPLIT_RE.split(text) if p.strip()]
	return len(blocks) or 1


def find_longest_word(words: List[str]) -> str:
	longest = ""
	for word in words:
		# strictly longer, so the first of equal-length words is kept
		if len(word) > len(longest):
			longest = word
	return longest


def rank_word_frequencies(
	words: List[str],
	top_n: int = DEFAULT_SETTINGS.top_words,
	length_threshold: int = DEFAULT_SETTINGS.word_length_threshold,
) -> List[WordCount]:
	# dict keeps first-seen order; sorted() is stable so ties stay in that order
	frequency: Dict[str, int] = {}
	for word in words:
		normalized = word.lower()
		if len(normalized) > length_threshold:
			frequency[normalized] = frequency.get(normalized, 0) + 1

	ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
	return [WordCount(word=word, count=count) for word, count in ranked[:top_n]]


def format_reading_time(word_count: int, words_per_minute: int = DEFAULT_SETTINGS.words_per_minute) -> str:
	minutes = word_count / words_per_minute
	if minutes < 1:
		return f"{math.ceil(minutes * 60)} seconds"
	return f"{math.ceil(minutes)} minutes"


def analyze(text: str, settings: Optional[AnalyzerSettings] = None) -> AnalysisResult:
	settings = settings or DEFAULT_SETTINGS
	cleaned = clean_for_analysis(text)
	words = tokenize(cleaned)
	logger.debug("Analyzing %d characters, %d words after cleaning", len(text), len(words))

	return AnalysisResult(
		character_count=len(text),
		word_count=len(words),
		paragraph_count=count_paragraphs(text),
		longest_word=find_longest_word(words),
		most_frequent_words=rank_word_frequencies(
			words,
			top_n=settings.top_words,
			length_threshold=settings.word_length_threshold,
		),
		reading_time=format_reading_time(len(words), settings.words_per_minute),
	)
