"""Unit tests for the command-line entry point (plugin_scaffold.cli)."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from plugin_scaffold import cli


pytestmark = pytest.mark.unit


@pytest.fixture
def clean_env():
    with patch.dict(os.environ, {}, clear=True):
        yield


def _patch_answers(answers):
    return patch.object(cli.InputCollector, "collect", return_value=answers)


class TestMain:
    def test_success(self, tmp_path: Path, full_answers, clean_env):
        with _patch_answers(full_answers):
            code = cli.main(["--plugins-dir", str(tmp_path)])
        assert code == 0
        assert sorted(p.name for p in (tmp_path / "acme").iterdir()) == [
            "access_token.go",
            "acme.go",
            "plugin.go",
        ]

    def test_plugins_dir_from_env(self, tmp_path: Path, minimal_answers):
        with patch.dict(os.environ, {"PLUGIN_SCAFFOLD_PLUGINS_DIR": str(tmp_path / "env")}, clear=True):
            with _patch_answers(minimal_answers):
                assert cli.main([]) == 0
        assert (tmp_path / "env" / "acme" / "plugin.go").is_file()

    def test_default_location_is_relative_to_cwd(self, tmp_path: Path, minimal_answers, clean_env, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with _patch_answers(minimal_answers):
            assert cli.main([]) == 0
        assert (tmp_path / "plugins" / "acme" / "plugin.go").is_file()

    def test_write_failure(self, tmp_path: Path, minimal_answers, clean_env):
        blocker = tmp_path / "blocked"
        blocker.write_text("", encoding="utf-8")
        with _patch_answers(minimal_answers), patch.object(cli, "print_error") as mock_error:
            code = cli.main(["--plugins-dir", str(blocker)])
        assert code == 1
        assert "could not write" in mock_error.call_args.args[0]

    def test_render_failure(self, tmp_path: Path, minimal_answers, clean_env):
        templates = tmp_path / "templates"
        templates.mkdir()
        (templates / "plugin.go.j2").write_text("{{ nope }}", encoding="utf-8")
        env = {"PLUGIN_SCAFFOLD_TEMPLATE_DIR": str(templates)}
        with patch.dict(os.environ, env), _patch_answers(minimal_answers):
            with patch.object(cli, "print_error") as mock_error:
                code = cli.main(["--plugins-dir", str(tmp_path / "out")])
        assert code == 1
        assert "plugin" in mock_error.call_args.args[0]
        assert not (tmp_path / "out" / "acme").exists()

    def test_markup_in_output_path(self, tmp_path: Path, minimal_answers, clean_env):
        plugins_dir = tmp_path / "[bold]" / "[/x]"
        with _patch_answers(minimal_answers):
            assert cli.main(["--plugins-dir", str(plugins_dir)]) == 0
        assert (plugins_dir / "acme" / "plugin.go").is_file()

    @pytest.mark.parametrize("exc", [KeyboardInterrupt, EOFError])
    def test_aborted_input(self, tmp_path: Path, exc, clean_env):
        with patch.object(cli.InputCollector, "collect", side_effect=exc):
            assert cli.main(["--plugins-dir", str(tmp_path)]) == 130
        assert list(tmp_path.iterdir()) == []


class TestParser:
    def test_no_arguments(self):
        args = cli.build_parser().parse_args([])
        assert args.plugins_dir is None

    def test_plugins_dir(self):
        assert cli.build_parser().parse_args(["--plugins-dir", "x"]).plugins_dir == "x"
