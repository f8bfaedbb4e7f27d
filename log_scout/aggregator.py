# File: log_scout/aggregator.py
"""log_scout.aggregator: сводный отчёт по одному запуску поиска."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Iterable, List, TypedDict

from log_scout.crawler.errors import FetchError
from log_scout.crawler.models import MatchResult, SearchRequest


class ErrorInfo(TypedDict):
    """Ошибка загрузки листинга или файла."""

    location: str
    kind: str
    message: str


@dataclass(slots=True)
class SearchReport:
    """Результаты поиска: найденные файлы, ошибки и статистика обхода."""

    root: str
    file_name: str
    pattern: str
    matches: List[str] = field(default_factory=list)
    errors: List[ErrorInfo] = field(default_factory=list)
    directories_visited: int = 0
    files_inspected: int = 0

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление SearchReport."""
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def _error_info(exc: FetchError) -> ErrorInfo:
    return ErrorInfo(location=exc.location, kind=exc.kind, message=str(exc))


def aggregate_results(
    request: SearchRequest,
    matches: Iterable[MatchResult],
    errors: Iterable[FetchError] = (),
    *,
    directories_visited: int = 0,
    files_inspected: int = 0,
) -> SearchReport:
    """Собирает SearchReport из совпадений и ошибок краулера, сохраняя порядок обхода."""
    return SearchReport(
        root=request.root_location,
        file_name=request.target_file_name,
        pattern=request.text_pattern,
        matches=[m.url for m in matches],
        errors=[_error_info(e) for e in errors],
        directories_visited=directories_visited,
        files_inspected=files_inspected,
    )


__all__ = ["ErrorInfo", "SearchReport", "aggregate_results"]
