# === FILE: robots_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для проверки robots.txt через командную строку.

Команды:
  check     Проверить пути по robots.txt и вывести/сохранить отчёт
  delay     Показать Crawl-delay для User-Agent
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --user-agent NAME   Имя краулера (override user_agent)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stderr, если не указан)
  --log-format FORMAT Формат логирования

Команда check опции:
  --json PATH         Сохранить JSON-отчёт в файл
  --pretty            Преформатировать JSON-вывод (отступ 2)
  --strict            Код выхода 1, если хотя бы один путь запрещён

Дополнительно:
  --version, -v       Показать версию RobotsScout

Пример:
  robots_scout --user-agent Googlebot check robots.txt / /private/ --pretty
"""
import sys
from pathlib import Path

import click

from robots_scout import __version__
from robots_scout.config import load_config
from robots_scout.logger import DEFAULT_FORMAT, init_logging, logger
from robots_scout.report import check_paths, render_json
from robots_scout.robots import Robots

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


def load_robots(robots_file: Path, user_agent: str) -> Robots:
    try:
        return Robots.from_file(robots_file, user_agent)
    except OSError as e:
        print_error(f'Не удалось прочитать {robots_file}: {e}')


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='RobotsScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--user-agent', '-a', 'user_agent',
    default=None,
    help='Имя краулера (override user_agent из конфига)'
)
@click.option(
    '--log-level', 'log_level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'], case_sensitive=False),
    help='Уровень логирования (override log_level)'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (stderr, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, user_agent, log_level, log_file, log_format):
    """Группа команд RobotsScout CLI."""
    try:
        cfg = load_config(config_path)
    except Exception as e:
        print_error(f'Ошибка загрузки конфигурации: {e}')

    overrides = {}
    if user_agent is not None:
        overrides['user_agent'] = user_agent
    if log_level is not None:
        overrides['log_level'] = log_level.upper()
    if log_file is not None:
        overrides['log_file'] = log_file
    if overrides:
        try:
            cfg = cfg.model_validate({**cfg.model_dump(), **overrides})
        except Exception as e:
            print_error(f'Некорректные параметры: {e}')

    init_logging(
        level=cfg.log_level,
        log_file=str(cfg.log_file) if cfg.log_file else None,
        log_format=log_format,
    )
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('check', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.Path(dir_okay=False, path_type=Path))
@click.argument('paths', nargs=-1, required=True)
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option('--pretty', is_flag=True, help='Преформатировать JSON-вывод (отступ 2)')
@click.option('--strict', is_flag=True, help='Код выхода 1, если есть запрещённые пути')
@click.pass_context
def check(ctx, robots_file, paths, json_output, pretty, strict):
    """Проверить PATHS по правилам ROBOTS_FILE."""
    cfg = ctx.obj['config']
    robots = load_robots(robots_file, cfg.user_agent)
    report = check_paths(robots, cfg.user_agent, paths)
    logger.info('Checked %d paths for %s', len(report.decisions), cfg.user_agent)

    if json_output:
        try:
            saved = render_json(report, json_output, pretty=pretty)
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')
        click.echo(f'JSON report: {saved}')
    else:
        click.echo(report.json(pretty=pretty))

    if strict and not report.all_allowed:
        sys.exit(1)


@cli.command('delay', context_settings=CONTEXT_SETTINGS)
@click.argument('robots_file', type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def delay(ctx, robots_file):
    """Показать Crawl-delay (в секундах) для User-Agent."""
    cfg = ctx.obj['config']
    robots = load_robots(robots_file, cfg.user_agent)
    click.echo(f'{robots.crawl_delay.total_seconds():g}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
