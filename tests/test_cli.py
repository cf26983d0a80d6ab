# 命令行测试
"""
测试 biograph 命令行
"""

import sys

import pytest
from unittest.mock import patch

from biograph.cli import build_parser, main
from biograph.knowledge.schema import schema_assertions
from biograph.utils import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """main() 会将日志绑定到测试捕获的 stderr，测试后恢复"""
    yield
    setup_logging("INFO", stream=sys.__stdout__)


class TestSdlCommand:
    """biograph sdl 命令测试"""

    def test_stdout(self, capsys):
        assert main(["sdl"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("# Biomedical")
        assert "type ClinicalTrial {" in out

    def test_single_module_with_directives(self, capsys):
        assert main(["sdl", "--module", "Literature", "--with-directives"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("enum _RelationDirections")
        assert "type Citation {" in out
        assert "type Gene {" not in out

    def test_unknown_module(self, capsys):
        assert main(["sdl", "--module", "Chemistry"]) == 2
        assert "Chemistry" in capsys.readouterr().err

    def test_output_file(self, tmp_path, capsys):
        target = tmp_path / "schema.graphql"

        assert main(["sdl", "--output", str(target)]) == 0

        assert "type GeneSymbol {" in target.read_text(encoding="utf-8")
        assert capsys.readouterr().out == ""


class TestLintCommand:
    """biograph lint 命令测试"""

    def test_passes(self, capsys):
        assert main(["lint"]) == 0

        out = capsys.readouterr().out
        assert "untyped-reference" in out
        assert "0 error(s), 1 warning(s)" in out

    def test_strict_fails_on_warnings(self):
        assert main(["lint", "--strict"]) == 1


class TestAssertionsCommand:
    """biograph assertions 命令测试"""

    def test_prints_statements(self, capsys, registry):
        assert main(["assertions"]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert lines == [s + ";" for s in schema_assertions(registry)]

    def test_apply(self, capsys):
        with patch("biograph.cli._apply_assertions", return_value=None) as apply:
            with patch("biograph.cli.asyncio.run", return_value=12) as run:
                assert main(["assertions", "--apply"]) == 0

        run.assert_called_once()
        apply.assert_called_once()
        assert "12 statement(s) applied" in capsys.readouterr().out


class TestParser:
    """参数解析测试"""

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_serve(self):
        with patch("biograph.api.main.run") as run:
            assert main(["serve"]) == 0
        run.assert_called_once()

    def test_log_level_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug", "lint"])

        assert args.log_level == "DEBUG"

    def test_unknown_log_level(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--log-level", "verbose", "lint"])

        assert excinfo.value.code == 2
        assert "invalid choice" in capsys.readouterr().err


class TestSetupLogging:
    """日志级别校验测试"""

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("verbose")
