"""
命令行入口
使用 typer 和 rich 暴露字符串、数值、日期与校验工具
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from . import __version__
from .config.settings import AppSettings
from .core.models import PasswordStrengthOptions
from .core.types import CaseStyle, ValidationKind
from .utils import dates, number, string, validate
from .utils.logging import configure_logging, get_logger

# 创建应用和控制台
app = typer.Typer(
    name="utilkit",
    help="通用工具函数命令行",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()

logger = get_logger(__name__)

# 当前设置（由全局回调初始化）
settings = AppSettings()

CASE_CONVERTERS: Dict[CaseStyle, Callable[[str], str]] = {
    CaseStyle.CAMEL: string.camel_case,
    CaseStyle.KEBAB: string.kebab_case,
    CaseStyle.SNAKE: string.snake_case,
    CaseStyle.PASCAL: string.pascal_case,
    CaseStyle.CAPITALIZE: string.capitalize,
}

VALIDATORS: Dict[ValidationKind, Callable[[str], bool]] = {
    ValidationKind.EMAIL: validate.is_email,
    ValidationKind.PHONE: validate.is_phone,
    ValidationKind.ID_CARD: validate.is_id_card,
    ValidationKind.URL: validate.is_url,
    ValidationKind.IP: validate.is_ip,
    ValidationKind.BANK_CARD: validate.is_bank_card,
    ValidationKind.HEX_COLOR: validate.is_hex_color,
    ValidationKind.QQ: validate.is_qq,
    ValidationKind.WECHAT: validate.is_wechat,
    ValidationKind.PLATE: validate.is_plate_number,
    ValidationKind.DATE: validate.is_valid_date,
}


def load_settings(config_file: Optional[Path]) -> AppSettings:
    """读取 YAML 配置文件并与环境变量合并"""
    path = config_file or AppSettings().config_file
    if path is None:
        return AppSettings()
    if not path.exists():
        raise typer.BadParameter(f"配置文件不存在: {path}")
    try:
        file_data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise typer.BadParameter(f"读取配置文件失败: {e}") from e
    if not isinstance(file_data, dict):
        raise typer.BadParameter("配置文件顶层必须是映射")
    try:
        return AppSettings(**file_data)
    except ValidationError as e:
        raise typer.BadParameter(f"配置文件无效: {e.errors()[0]['msg']}") from e


# 回调函数
def version_callback(value: bool):
    """版本回调"""
    if value:
        console.print(f"utilkit v{__version__}")
        raise typer.Exit()


# 全局选项
@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="显示版本信息",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="详细输出"),
    config_file: Optional[Path] = typer.Option(
        None, "--config-file", "-c", help="从配置文件加载设置 (YAML)"
    ),
):
    """通用工具函数命令行"""
    global settings
    settings = load_settings(config_file)

    # 初始化日志
    configure_logging(verbose or settings.verbose)
    logger.debug("cli_started", verbose=verbose, config_file=str(config_file) if config_file else None)


def _fail(message: str) -> None:
    console.print(f"[red]{message}[/red]")
    logger.info("cli_failed", message=message)
    raise typer.Exit(1)


@app.command("case")
def case_command(
    style: CaseStyle = typer.Argument(..., help="命名风格"),
    text: str = typer.Argument(..., help="待转换文本"),
):
    """转换命名风格"""
    console.print(CASE_CONVERTERS[style](text), markup=False, highlight=False)


@app.command("validate")
def validate_command(
    kind: ValidationKind = typer.Argument(..., help="校验类型"),
    value: str = typer.Argument(..., help="待校验的值"),
):
    """校验输入格式，无效时退出码为 1"""
    valid = VALIDATORS[kind](value)
    logger.debug("validated", kind=kind.value, valid=valid)
    if not valid:
        _fail(f"✗ 无效的 {kind.value}: {value}")
    console.print(f"[green]✓ 有效的 {kind.value}[/green]")


@app.command("password")
def password_command(
    password: str = typer.Argument(..., help="密码"),
    min_length: Optional[int] = typer.Option(None, "--min-length", help="最小长度"),
    no_symbols: bool = typer.Option(False, "--no-symbols", help="不要求特殊字符"),
):
    """计算密码强度 (0-4)"""
    try:
        options = PasswordStrengthOptions(
            min_length=min_length if min_length is not None else settings.password_min_length,
            require_symbols=not no_symbols,
        )
    except ValidationError as e:
        raise typer.BadParameter(e.errors()[0]["msg"], param_hint="--min-length") from e

    strength = validate.get_password_strength(password, options)

    table = Table(title="密码强度")
    table.add_column("属性", style="cyan")
    table.add_column("值", style="green")
    table.add_row("长度", str(len(password)))
    table.add_row("最小长度", str(options.min_length))
    table.add_row("强度", f"{strength}/4")
    console.print(table)


@app.command("filesize")
def filesize_command(
    size: float = typer.Argument(..., help="字节数"),
    precision: Optional[int] = typer.Option(None, "--precision", "-p", min=0, help="小数位数"),
):
    """字节数转为可读文件大小"""
    digits = precision if precision is not None else settings.precision
    console.print(number.format_file_size(size, digits), highlight=False)


@app.command("thousands")
def thousands_command(
    value: float = typer.Argument(..., help="数值"),
    separator: Optional[str] = typer.Option(None, "--separator", "-s", help="分隔符"),
):
    """千分位格式化"""
    sep = separator if separator is not None else settings.thousands_separator
    num = int(value) if value.is_integer() else value
    console.print(number.format_thousands(num, sep), highlight=False)


@app.command("format-date")
def format_date_command(
    value: str = typer.Argument(..., help="日期字符串"),
    fmt: Optional[str] = typer.Option(None, "--format", "-f", help="格式，如 YYYY-MM-DD"),
):
    """格式化日期"""
    try:
        result = dates.format_date(value, fmt or settings.date_format)
    except ValueError as e:
        _fail(f"日期无效: {e}")
    console.print(result, highlight=False)


@app.command("relative-time")
def relative_time_command(
    value: str = typer.Argument(..., help="日期字符串"),
    base: Optional[str] = typer.Option(None, "--base", "-b", help="基准时间，默认当前时间"),
):
    """相对时间描述"""
    try:
        result = dates.get_relative_time(value, base)
    except ValueError as e:
        _fail(f"日期无效: {e}")
    console.print(result, highlight=False)


if __name__ == "__main__":
    app()
