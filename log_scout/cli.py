# === FILE: log_scout/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска LogScout через командную строку.

Команды:
  search    Рекурсивно обойти листинги и вывести файлы, содержащие строку
  config    Показать текущую конфигурацию

Общие опции:
  --config PATH       Путь к YAML/JSON-конфигу (default: configs/default.yaml, если есть)
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (только stdout, если не указан)
  --log-format FORMAT Формат логирования (e.g. "%(asctime)s %(levelname)s %(message)s")

Команда search опции:
  --url PATH          Каталог, с которого начинается обход
  --file-name NAME    Имя файла, в котором ищется текст
  --pattern TEXT      Искомая строка (не регулярное выражение)
  --base-url URL      Хост веб-интерфейса листингов
  --timeout SEC       Таймаут одного запроса (секунд)
  --json PATH         Сохранить JSON-отчёт в файл
  --html PATH         Сохранить HTML-отчёт в файл
  --template DIR      Папка с Jinja2-шаблоном report.html.j2
  --pretty            Преформатировать JSON-отчёт (отступ 2)
  --scan-timeout SEC  Таймаут всего поиска (секунд)

Дополнительно:
  --version, -v       Показать версию LogScout

Пример:
  log-scout search --url /gcs/kubernetes-jenkins/logs/ --file-name serial-1.log --pattern "soft lockup"
"""
import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from log_scout import __version__
from log_scout.config import load_config, override_config
from log_scout.logger import init_logging
from log_scout.report.html_report import render_html
from log_scout.report.json_report import render_json
from log_scout.scanner import start_search

CONTEXT_SETTINGS = dict(help_option_names=["--help"])


def print_error(message: str):
    click.secho(message, fg='red', err=True)
    sys.exit(1)


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, '--version', '-v', message='LogScout, version %(version)s')
@click.option(
    '--config', '-c', 'config_path',
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Путь к файлу конфигурации YAML/JSON.'
)
@click.option(
    '--log-level', 'log_level',
    default='INFO', show_default=True,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']),
    help='Уровень логирования'
)
@click.option(
    '--log-file', 'log_file',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Путь к файлу логов (только stdout, если не указан)'
)
@click.option(
    '--log-format', 'log_format',
    default='%(asctime)s %(levelname)s %(message)s',
    show_default=True,
    help='Строка формата для логов'
)
@click.pass_context
def cli(ctx, config_path, log_level, log_file, log_format):
    """Группа команд LogScout CLI."""
    init_logging(
        level=log_level,
        log_file=str(log_file) if log_file else None,
        log_format=log_format
    )
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, TypeError) as e:
        # ValidationError is a ValueError
        print_error(f'Ошибка загрузки конфигурации: {e}')
    ctx.ensure_object(dict)
    ctx.obj['config'] = cfg


@cli.command('search', context_settings=CONTEXT_SETTINGS)
@click.option('--url', '-u', 'root_path', default=None, help='Каталог, с которого начинается обход')
@click.option('--file-name', '-f', 'file_name', default=None, help='Имя файла, в котором ищется текст')
@click.option('--pattern', '-p', 'pattern', default=None, help='Искомая строка (не регулярное выражение)')
@click.option('--base-url', 'base_url', default=None, help='Хост веб-интерфейса листингов')
@click.option('--timeout', 'timeout', type=float, default=None, help='Таймаут одного запроса (секунд)')
@click.option(
    '--json', '-j', 'json_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить JSON-отчёт в файл'
)
@click.option(
    '--html', '-h', 'html_output',
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help='Сохранить HTML-отчёт в файл'
)
@click.option(
    '--template', '-t', 'template_dir',
    default=None,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Папка с Jinja2-шаблоном (встроенный, если не указана)'
)
@click.option(
    '--pretty', is_flag=True,
    help='Преформатировать JSON-отчёт (отступ 2)'
)
@click.option(
    '--scan-timeout', 'scan_timeout',
    type=float,
    default=None,
    help='Таймаут всего поиска (секунд)'
)
@click.pass_context
def search(ctx, root_path, file_name, pattern, base_url, timeout,
           json_output, html_output, template_dir, pretty, scan_timeout):
    """Найти файлы с заданным именем, содержащие строку, и вывести их URL."""
    try:
        cfg = override_config(
            ctx.obj['config'],
            root_path=root_path,
            file_name=file_name,
            pattern=pattern,
            base_url=base_url,
            timeout=timeout,
        )
    except ValidationError as e:
        print_error(f'Ошибка в параметрах поиска: {e}')

    # совпадения печатаются сразу, в порядке обхода
    search_coro = start_search(cfg, on_match=lambda match: click.echo(match.url))
    try:
        if scan_timeout:
            report = asyncio.run(asyncio.wait_for(search_coro, timeout=scan_timeout))
        else:
            report = asyncio.run(search_coro)
    except asyncio.TimeoutError:
        print_error(f'Поиск не завершён за {scan_timeout} секунд')

    if json_output:
        try:
            saved_json = render_json(report, json_output, pretty=pretty)
            click.echo(f'JSON report: {saved_json}')
        except OSError as e:
            print_error(f'Ошибка при сохранении JSON: {e}')

    if html_output:
        try:
            saved_html = render_html(report, template_dir, html_output)
            click.echo(f'HTML report: {saved_html}')
        except OSError as e:
            print_error(f'Ошибка при сохранении HTML: {e}')


@cli.command('config', context_settings=CONTEXT_SETTINGS)
@click.pass_context
def show_config(ctx):
    """Показать текущую конфигурацию в JSON."""
    cfg = ctx.obj['config']
    click.echo(cfg.model_dump_json(indent=2))


if __name__ == "__main__":
    cli()
