"""Tests for export configuration validation."""

import pytest

from klipbook.config import DEFAULT_MAX_BOOKS, ConfigError, ExportConfig


def test_defaults(clippings_file):
    config = ExportConfig(input_path=clippings_file)

    assert config.max_books == DEFAULT_MAX_BOOKS
    assert config.force is False
    assert config.skip_malformed is False


def test_valid_config_passes(clippings_file, tmp_path):
    ExportConfig(input_path=clippings_file, output_path=tmp_path / "out.json").validate(
        output_is_dir=False
    )


def test_negative_max_books(clippings_file):
    with pytest.raises(ConfigError, match=">= 0"):
        ExportConfig(input_path=clippings_file, max_books=-1).validate(output_is_dir=True)


def test_missing_input_file(tmp_path):
    with pytest.raises(ConfigError, match="Input file not found"):
        ExportConfig(input_path=tmp_path / "missing.txt").validate(output_is_dir=True)


def test_json_output_is_directory(clippings_file, tmp_path):
    config = ExportConfig(input_path=clippings_file, output_path=tmp_path)

    with pytest.raises(ConfigError, match="is a directory"):
        config.validate(output_is_dir=False)


def test_html_output_is_file(clippings_file):
    config = ExportConfig(input_path=clippings_file, output_path=clippings_file)

    with pytest.raises(ConfigError, match="existing file"):
        config.validate(output_is_dir=True)
