from __future__ import annotations

import pytest
from typer.testing import CliRunner

from utilkit import __version__
from utilkit.cli import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def test_version(runner):
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.parametrize(
    "style, text, expected",
    [
        ("camel", "hello-world", "helloWorld"),
        ("kebab", "helloWorld", "hello-world"),
        ("snake", "helloWorld", "hello_world"),
        ("pascal", "hello_world", "HelloWorld"),
        ("capitalize", "hELLO", "Hello"),
    ],
)
def test_case(runner, style, text, expected):
    result = runner.invoke(app, ["case", style, text])
    assert result.exit_code == 0
    assert result.output.strip() == expected


def test_case_rejects_unknown_style(runner):
    result = runner.invoke(app, ["case", "shout", "hi"])
    assert result.exit_code != 0


class TestValidateCommand:
    """校验命令：有效退出码 0，无效退出码 1"""

    def test_valid(self, runner):
        result = runner.invoke(app, ["validate", "email", "test@example.com"])
        assert result.exit_code == 0
        assert "✓" in result.output

    def test_invalid(self, runner):
        result = runner.invoke(app, ["validate", "phone", "12345"])
        assert result.exit_code == 1
        assert "✗" in result.output

    def test_hyphenated_kind(self, runner):
        result = runner.invoke(app, ["validate", "bank-card", "4111 1111 1111 1111"])
        assert result.exit_code == 0


def test_password_table(runner):
    result = runner.invoke(app, ["password", "Abcdefg1"])
    assert result.exit_code == 0
    assert "4/4" in result.output


def test_password_min_length(runner):
    result = runner.invoke(app, ["password", "Ab1", "--min-length", "3"])
    assert result.exit_code == 0
    assert "4/4" in result.output


def test_filesize(runner):
    result = runner.invoke(app, ["filesize", "1536"])
    assert result.exit_code == 0
    assert result.output.strip() == "1.5 KB"

    result = runner.invoke(app, ["filesize", "1536", "--precision", "0"])
    assert result.output.strip() == "2 KB"


def test_thousands(runner):
    result = runner.invoke(app, ["thousands", "1234567"])
    assert result.output.strip() == "1,234,567"

    result = runner.invoke(app, ["thousands", "1234567.5", "--separator", "_"])
    assert result.output.strip() == "1_234_567.5"


def test_format_date(runner):
    result = runner.invoke(app, ["format-date", "2024-01-15T10:30:00", "--format", "YYYY/MM/DD HH:mm"])
    assert result.exit_code == 0
    assert result.output.strip() == "2024/01/15 10:30"


def test_format_date_invalid(runner):
    result = runner.invoke(app, ["format-date", "not-a-date"])
    assert result.exit_code == 1


def test_relative_time(runner):
    result = runner.invoke(app, ["relative-time", "2024-01-10 09:00:00", "--base", "2024-01-10 12:00:00"])
    assert result.exit_code == 0
    assert result.output.strip() == "3小时前"


class TestConfigFile:
    """YAML 配置文件覆盖默认设置"""

    def test_config_file_sets_defaults(self, runner, tmp_path):
        config = tmp_path / "utilkit.yaml"
        config.write_text("thousands_separator: \"'\"\nprecision: 1\n", encoding="utf-8")

        result = runner.invoke(app, ["--config-file", str(config), "thousands", "1234567"])
        assert result.output.strip() == "1'234'567"

        result = runner.invoke(app, ["--config-file", str(config), "filesize", "1600"])
        assert result.output.strip() == "1.6 KB"

    def test_missing_config_file(self, runner, tmp_path):
        result = runner.invoke(app, ["--config-file", str(tmp_path / "missing.yaml"), "case", "camel", "a-b"])
        assert result.exit_code != 0

    def test_invalid_config_value(self, runner, tmp_path):
        config = tmp_path / "bad.yaml"
        config.write_text("precision: 99\n", encoding="utf-8")

        result = runner.invoke(app, ["--config-file", str(config), "filesize", "1"])
        assert result.exit_code != 0

    def test_config_file_from_environment(self, runner, tmp_path, monkeypatch):
        config = tmp_path / "env.yaml"
        config.write_text("date_format: YYYY\n", encoding="utf-8")
        monkeypatch.setenv("UTILKIT_CONFIG_FILE", str(config))

        result = runner.invoke(app, ["format-date", "2024-05-06"])
        assert result.output.strip() == "2024"
