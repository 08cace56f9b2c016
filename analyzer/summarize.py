from __future__ import annotations

import logging
import re
from typing import List, Optional

from .clean import clean_for_summary
from .config import DEFAULT_SETTINGS, AnalyzerSettings


logger = logging.getLogger(__name__)

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")


def split_sentences(cleaned: str, word_threshold: int = DEFAULT_SETTINGS.sentence_word_threshold) -> List[str]:
	"""Fragments between runs of ``.!?`` having more than ``word_threshold`` tokens.

	Fragments are returned as split, surrounding whitespace included.
	"""
	sentences: List[str] = []
	for fragment in SENTENCE_SPLIT_RE.split(cleaned):
		stripped = fragment.strip()
		if stripped and len(stripped.split()) > word_threshold:
			sentences.append(fragment)
	return sentences


def summarize(text: str, settings: Optional[AnalyzerSettings] = None) -> str:
	settings = settings or DEFAULT_SETTINGS
	sentences = split_sentences(clean_for_summary(text), settings.sentence_word_threshold)
	logger.debug("%d qualifying sentences", len(sentences))
	if not sentences:
		logger.debug("No qualifying sentences, using fallback summary")
		return settings.fallback_summary

	parts: List[str] = sentences[: settings.summary_sentences]
	return ". ".join(parts) + "."
