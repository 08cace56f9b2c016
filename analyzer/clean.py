from __future__ import annotations

import re
from typing import Callable, List


# Heuristics only: none of these understand nesting.
FUNCTION_BLOCK_RE = re.compile(r"\(function\([^)]*\)\{[^}]*\}")
BRACKET_GROUP_RE = re.compile(r"\[[^\]]*\]")
BRACE_GROUP_RE = re.compile(r"\{[^}]*\}")
WHITESPACE_RE = re.compile(r"\s+")

# Word characters are ASCII letters, digits and underscore.
ANALYSIS_SPECIAL_RE = re.compile(r"[^A-Za-z0-9_\s]")
SUMMARY_SPECIAL_RE = re.compile(r"[^A-Za-z0-9_\s.,!?]")

Stage = Callable[[str], str]


def strip_function_blocks(text: str) -> str:
	return FUNCTION_BLOCK_RE.sub("", text)


def strip_bracket_groups(text: str) -> str:
	return BRACKET_GROUP_RE.sub("", text)


def strip_brace_groups(text: str) -> str:
	return BRACE_GROUP_RE.sub("", text)


def replace_special_chars(text: str, keep_punctuation: bool = False) -> str:
	pattern = SUMMARY_SPECIAL_RE if keep_punctuation else ANALYSIS_SPECIAL_RE
	return pattern.sub(" ", text)


def collapse_whitespace(text: str) -> str:
	return WHITESPACE_RE.sub(" ", text).strip()


def run_stages(text: str, stages: List[Stage]) -> str:
	for stage in stages:
		text = stage(text)
	return text


ANALYSIS_STAGES: List[Stage] = [
	strip_function_blocks,
	strip_bracket_groups,
	strip_brace_groups,
	replace_special_chars,
	collapse_whitespace,
]

SUMMARY_STAGES: List[Stage] = [
	strip_function_blocks,
	strip_bracket_groups,
	strip_brace_groups,
	lambda text: replace_special_chars(text, keep_punctuation=True),
	collapse_whitespace,
]


def clean_for_analysis(text: str) -> str:
	"""Drop code-like constructs, then everything but word characters."""
	return run_stages(text, ANALYSIS_STAGES)


def clean_for_summary(text: str) -> str:
	"""Same as :func:`clean_for_analysis` but keeps ``. , ! ?``."""
	return run_stages(text, SUMMARY_STAGES)
