"""Tests for configuration loading."""

import pytest

from prpreview_core.config import get_action_input, load_config, parse_extensions


@pytest.fixture(autouse=True)
def _clear_action_inputs(monkeypatch):
    for name in ("SHOWDETAILEDURLS", "FILEEXTENSION", "ORIGINALPATH", "REPLACEDPATH", "REPOTOKEN"):
        monkeypatch.delenv(f"INPUT_{name}", raising=False)


def test_defaults_applied_when_no_config_file(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["show_detailed_urls"] == "false"
    assert config["file_extension"] == "md, html"
    assert config["original_path"] == "_site/"
    assert config["replaced_path"] == "/"


def test_config_file_overrides_defaults(tmp_path):
    cfg = tmp_path / ".prpreview.yml"
    cfg.write_text("original_path: build/\nfile_extension: html\n")
    config = load_config(config_path=str(cfg))
    assert config["original_path"] == "build/"
    assert config["file_extension"] == "html"


def test_yaml_bool_echoed_as_lowercase_text(tmp_path):
    cfg = tmp_path / ".prpreview.yml"
    cfg.write_text("show_detailed_urls: true\n")
    config = load_config(config_path=str(cfg))
    assert config["show_detailed_urls"] == "true"


def test_action_inputs_override_config_file(tmp_path, monkeypatch):
    cfg = tmp_path / ".prpreview.yml"
    cfg.write_text("original_path: build/\n")
    monkeypatch.setenv("INPUT_ORIGINALPATH", "public/")
    monkeypatch.setenv("INPUT_SHOWDETAILEDURLS", "true")
    config = load_config(config_path=str(cfg))
    assert config["original_path"] == "public/"
    assert config["show_detailed_urls"] == "true"


def test_empty_action_input_falls_back_to_default(tmp_path, monkeypatch):
    monkeypatch.setenv("INPUT_FILEEXTENSION", "")
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    assert config["file_extension"] == "md, html"


def test_cli_overrides_action_inputs(tmp_path, monkeypatch):
    monkeypatch.setenv("INPUT_REPLACEDPATH", "/docs/")
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"), cli_overrides={"replaced_path": "/x/"})
    assert config["replaced_path"] == "/x/"


def test_none_cli_overrides_ignored(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"), cli_overrides={"original_path": None})
    assert config["original_path"] == "_site/"


def test_empty_cli_override_is_kept(tmp_path):
    config = load_config(config_path=str(tmp_path / "nonexistent.yml"), cli_overrides={"original_path": ""})
    assert config["original_path"] == ""


def test_get_action_input_reads_upper_cased_env(monkeypatch):
    monkeypatch.setenv("INPUT_REPOTOKEN", "  tok  ")
    assert get_action_input("repoToken") == "tok"


def test_defaults_are_not_shared_between_loads(tmp_path):
    config_a = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_b = load_config(config_path=str(tmp_path / "nonexistent.yml"))
    config_a["original_path"] = "changed/"
    assert config_b["original_path"] == "_site/"


class TestParseExtensions:
    def test_splits_and_trims(self):
        assert parse_extensions("md, html ,  txt") == ["md", "html", "txt"]

    def test_drops_blank_entries(self):
        assert parse_extensions("md,, ,html") == ["md", "html"]

    def test_empty_string_yields_empty_list(self):
        assert parse_extensions("") == []

    def test_accepts_yaml_list(self):
        assert parse_extensions([" md", "html"]) == ["md", "html"]

    def test_none(self):
        assert parse_extensions(None) == []
