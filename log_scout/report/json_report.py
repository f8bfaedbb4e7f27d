# log_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта LogScout.

Сериализация объекта SearchReport в файл.
"""
from pathlib import Path

from log_scout.aggregator import SearchReport


def render_json(report: SearchReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект SearchReport с результатами поиска
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 вместо компактной записи
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=pretty), encoding="utf-8")
    return output
