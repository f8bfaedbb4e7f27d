# === FILE: log_scout/scanner.py ===
"""
Модуль-обёртка для функции запуска поиска.
"""
from typing import Callable, List, Optional

from log_scout.aggregator import SearchReport, aggregate_results
from log_scout.config import SearchConfig
from log_scout.crawler.crawler import ListingCrawler
from log_scout.crawler.models import MatchResult
from log_scout.logger import logger


async def start_search(
    cfg: SearchConfig,
    on_match: Optional[Callable[[MatchResult], None]] = None,
) -> SearchReport:
    """
    Запускает краулер в контексте и возвращает сводный отчёт.

    Parameters
    ----------
    cfg : SearchConfig
        Конфигурация поиска.
    on_match : callable, optional
        Вызывается для каждого совпадения сразу, как только оно найдено.

    Returns
    -------
    SearchReport
        Совпадения в порядке обхода, ошибки загрузки и статистика.
    """
    matches: List[MatchResult] = []
    async with ListingCrawler(cfg) as crawler:
        async for match in crawler.crawl():
            matches.append(match)
            if on_match is not None:
                on_match(match)
    if crawler.errors:
        logger.warning("Поиск завершён с ошибками загрузки: %d", len(crawler.errors))
    return aggregate_results(
        cfg.request,
        matches,
        crawler.errors,
        directories_visited=crawler.directories_visited,
        files_inspected=crawler.files_inspected,
    )

__all__ = ["start_search"]
