from __future__ import annotations

import codecs
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Tuple, Union

from .model import SourceInfo


logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {".txt"}
TEXT_CONTENT_TYPES = {"text/plain"}


class SourceError(Exception):
	pass


class UnsupportedFileType(SourceError):
	pass


class FileTooLarge(SourceError):
	pass


class SourceDecodeError(SourceError):
	pass


def is_text_file(filename: str, content_type: Optional[str] = None) -> bool:
	"""Accept ``.txt`` names or a ``text/plain`` content type."""
	if content_type and content_type.split(";", 1)[0].strip().lower() in TEXT_CONTENT_TYPES:
		return True
	_, ext = os.path.splitext(filename or "")
	return ext.lower() in TEXT_EXTENSIONS


def decode_text(data: bytes) -> str:
	if data.startswith(codecs.BOM_UTF8):
		data = data[len(codecs.BOM_UTF8):]
	try:
		return data.decode("utf-8")
	except UnicodeDecodeError as e:
		raise SourceDecodeError(f"File is not valid UTF-8 text: {e}") from e


def describe_source(filename: str, size_bytes: int, content_type: Optional[str] = None) -> SourceInfo:
	return SourceInfo(
		filename=filename,
		content_type=content_type,
		size_bytes=size_bytes,
		size_kb=round(size_bytes / 1024, 1),
	)


def read_upload(
	filename: str,
	data: bytes,
	content_type: Optional[str] = None,
	max_bytes: Optional[int] = None,
) -> Tuple[str, SourceInfo]:
	"""Validate and decode an uploaded file, returning its text and metadata."""
	if not is_text_file(filename, content_type):
		raise UnsupportedFileType(f"Please upload a .txt file only (got {filename!r})")
	if max_bytes is not None and len(data) > max_bytes:
		raise FileTooLarge(f"{filename} is {len(data)} bytes, limit is {max_bytes}")
	text = decode_text(data)
	info = describe_source(filename, len(data), content_type)
	logger.debug("Read %s (%.1f KB)", filename, info.size_kb)
	return text, info


def read_text_source(path: Union[str, Path, None]) -> str:
	"""Read a text file from disk, or stdin when ``path`` is ``None`` or ``-``."""
	if path is None or str(path) == "-":
		return decode_text(sys.stdin.buffer.read())
	p = Path(path)
	if not is_text_file(p.name):
		raise UnsupportedFileType(f"Please use a .txt file only (got {p.name!r})")
	try:
		data = p.read_bytes()
	except OSError as e:
		raise SourceError(f"Cannot read {p}: {e}") from e
	return decode_text(data)
