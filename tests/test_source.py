import codecs

import pytest

from analyzer.source import (
	FileTooLarge,
	SourceDecodeError,
	UnsupportedFileType,
	is_text_file,
	read_text_source,
	read_upload,
)


def test_is_text_file():
	assert is_text_file("notes.txt")
	assert is_text_file("NOTES.TXT")
	assert is_text_file("notes", "text/plain; charset=utf-8")
	assert not is_text_file("report.pdf", "application/pdf")
	assert not is_text_file("")


def test_read_upload_returns_text_and_info():
	text, info = read_upload("notes.txt", b"x" * 1536, content_type="text/plain")
	assert text == "x" * 1536
	assert info.filename == "notes.txt"
	assert info.size_bytes == 1536
	assert info.size_kb == 1.5


def test_read_upload_drops_utf8_bom():
	text, _ = read_upload("notes.txt", codecs.BOM_UTF8 + "héllo".encode("utf-8"))
	assert text == "héllo"


def test_read_upload_rejects_other_types():
	with pytest.raises(UnsupportedFileType):
		read_upload("image.png", b"\x89PNG", content_type="image/png")


def test_read_upload_rejects_invalid_utf8():
	with pytest.raises(SourceDecodeError):
		read_upload("notes.txt", b"\xff\xfe\xfa")


def test_read_upload_size_limit():
	with pytest.raises(FileTooLarge):
		read_upload("notes.txt", b"abcdef", max_bytes=5)


def test_read_text_source(tmp_path):
	p = tmp_path / "doc.txt"
	p.write_text("Para one.\n\nPara two.", encoding="utf-8")
	assert read_text_source(p) == "Para one.\n\nPara two."
	with pytest.raises(UnsupportedFileType):
		read_text_source(tmp_path / "doc.md")
