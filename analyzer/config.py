from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TEXT_ANALYZER_CONFIG"

FALLBACK_SUMMARY = (
	"Unable to generate summary from the provided content. "
	"The text may contain too many special characters or code-like content."
)


class SettingsError(ValueError):
	pass


class AnalyzerSettings(BaseModel):
	"""Tunable constants of the analysis and summary passes.

	Thresholds are exclusive: a word is counted only when its length is
	strictly greater than ``word_length_threshold`` and a sentence is kept
	only with strictly more tokens than ``sentence_word_threshold``.
	"""

	model_config = ConfigDict(frozen=True, extra="forbid")

	top_words: int = Field(8, ge=0)
	word_length_threshold: int = Field(2, ge=0)
	words_per_minute: int = Field(200, gt=0)
	summary_sentences: int = Field(3, ge=1)
	sentence_word_threshold: int = Field(3, ge=0)
	fallback_summary: str = FALLBACK_SUMMARY

	@staticmethod
	def load(path: Union[str, Path]) -> "AnalyzerSettings":
		try:
			data = json.loads(Path(path).read_text(encoding="utf-8"))
		except (OSError, json.JSONDecodeError) as e:
			raise SettingsError(f"Cannot read settings from {path}: {e}") from e
		if not isinstance(data, dict):
			raise SettingsError(f"Settings file {path} must contain a JSON object")
		try:
			return AnalyzerSettings(**data)
		except ValidationError as e:
			raise SettingsError(f"Invalid settings in {path}: {e}") from e

	def dump(self) -> str:
		return json.dumps(self.model_dump(), indent=2)


DEFAULT_SETTINGS = AnalyzerSettings()


def load_settings(path: Optional[Union[str, Path]] = None) -> AnalyzerSettings:
	"""Explicit path wins, then $TEXT_ANALYZER_CONFIG, then defaults."""
	if path is None:
		path = os.getenv(CONFIG_ENV_VAR) or None
	if path is None:
		return DEFAULT_SETTINGS
	logger.info("Loading analyzer settings from %s", path)
	return AnalyzerSettings.load(path)
