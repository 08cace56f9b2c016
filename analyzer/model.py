from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class WordCount(BaseModel):
	model_config = ConfigDict(frozen=True)

	word: str
	count: int


class AnalysisResult(BaseModel):
	model_config = ConfigDict(frozen=True)

	character_count: int
	word_count: int
	paragraph_count: int
	longest_word: str
	most_frequent_words: List[WordCount] = []
	reading_time: str


class SummaryResult(BaseModel):
	summary: str


class SourceInfo(BaseModel):
	filename: str
	content_type: Optional[str] = None
	size_bytes: int
	size_kb: float


class AnalyzeResponse(BaseModel):
	source: SourceInfo
	analysis: AnalysisResult
	summary: str
