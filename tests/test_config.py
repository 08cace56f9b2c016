import json

import pytest

from analyzer.config import (
	CONFIG_ENV_VAR,
	DEFAULT_SETTINGS,
	FALLBACK_SUMMARY,
	AnalyzerSettings,
	SettingsError,
	load_settings,
)


def test_defaults():
	s = AnalyzerSettings()
	assert s.top_words == 8
	assert s.word_length_threshold == 2
	assert s.words_per_minute == 200
	assert s.summary_sentences == 3
	assert s.sentence_word_threshold == 3
	assert s.fallback_summary == FALLBACK_SUMMARY


def test_load_partial_file(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"top_words": 5}))
	s = AnalyzerSettings.load(p)
	assert s.top_words == 5
	assert s.words_per_minute == 200


def test_load_rejects_bad_values(tmp_path):
	p = tmp_path / "settings.json"
	p.write_text(json.dumps({"words_per_minute": 0}))
	with pytest.raises(SettingsError):
		AnalyzerSettings.load(p)
	p.write_text(json.dumps({"unknown": 1}))
	with pytest.raises(SettingsError):
		AnalyzerSettings.load(p)
	p.write_text("[1, 2]")
	with pytest.raises(SettingsError):
		AnalyzerSettings.load(p)


def test_load_missing_file(tmp_path):
	with pytest.raises(SettingsError):
		AnalyzerSettings.load(tmp_path / "missing.json")


def test_load_settings_resolution(tmp_path, monkeypatch):
	monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
	assert load_settings() == DEFAULT_SETTINGS

	p = tmp_path / "settings.json"
	p.write_text(AnalyzerSettings(summary_sentences=2).dump())
	monkeypatch.setenv(CONFIG_ENV_VAR, str(p))
	assert load_settings().summary_sentences == 2
