from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, File, HTTPException, UploadFile
from pydantic import BaseModel

from analyzer.config import AnalyzerSettings, load_settings
from analyzer.model import AnalysisResult, AnalyzeResponse, SummaryResult
from analyzer.source import FileTooLarge, SourceError, UnsupportedFileType, read_upload
from analyzer.stats import analyze
from analyzer.summarize import summarize


logger = logging.getLogger(__name__)

MAX_UPLOAD_BYTES = 5 * 1024 * 1024


class TextRequest(BaseModel):
	text: str


def _require_text(text: str) -> str:
	if not text.strip():
		raise HTTPException(status_code=400, detail="No content to analyze")
	return text


def create_app(settings: Optional[AnalyzerSettings] = None, max_upload_bytes: int = MAX_UPLOAD_BYTES) -> FastAPI:
	settings = settings or load_settings()
	app = FastAPI(title="Text Analyzer")

	@app.get("/settings", response_model=AnalyzerSettings)
	def get_settings() -> AnalyzerSettings:
		return settings

	@app.post("/analyze", response_model=AnalysisResult)
	def analyze_text(req: TextRequest) -> AnalysisResult:
		return analyze(_require_text(req.text), settings)

	@app.post("/summarize", response_model=SummaryResult)
	def summarize_text(req: TextRequest) -> SummaryResult:
		return SummaryResult(summary=summarize(_require_text(req.text), settings))

	@app.post("/files/analyze", response_model=AnalyzeResponse)
	async def analyze_file(file: UploadFile = File(...)) -> AnalyzeResponse:
		data = await file.read()
		try:
			text, info = read_upload(
				file.filename or "",
				data,
				content_type=file.content_type,
				max_bytes=max_upload_bytes,
			)
		except UnsupportedFileType as e:
			logger.warning("Rejected upload %r: %s", file.filename, e)
			raise HTTPException(status_code=415, detail=str(e))
		except FileTooLarge as e:
			logger.warning("Rejected upload %r: %s", file.filename, e)
			raise HTTPException(status_code=413, detail=str(e))
		except SourceError as e:
			logger.warning("Rejected upload %r: %s", file.filename, e)
			raise HTTPException(status_code=400, detail=str(e))

		return AnalyzeResponse(
			source=info,
			analysis=analyze(text, settings),
			summary=summarize(text, settings),
		)

	return app


app = create_app()
