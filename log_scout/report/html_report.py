"""log_scout.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from log_scout.aggregator import SearchReport

BUNDLED_TEMPLATES = Path(__file__).parent / "templates"


def render_html(
    report: SearchReport,
    template_dir: Optional[Union[Path, str]],
    output_path: Union[Path, str],
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: объект SearchReport.
        template_dir: директория с шаблоном ``report.html.j2``;
            при ``None`` используется встроенный шаблон пакета.
        output_path: путь к итоговому HTML-файлу.

    Returns:
        Path до сохранённого HTML-файла.
    """
    template_dir = Path(template_dir) if template_dir is not None else BUNDLED_TEMPLATES
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template("report.html.j2")

    context: dict[str, Any] = {
        "root": report.root,
        "file_name": report.file_name,
        "pattern": report.pattern,
        "matches": report.matches,
        "errors": report.errors,
        "directories_visited": report.directories_visited,
        "files_inspected": report.files_inspected,
    }

    html_content = template.render(**context)
    output_path.write_text(html_content, encoding="utf-8")

    return output_path
