# === FILE: log_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации поиска LogScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    ValidationError,
    field_validator,
)

from log_scout.crawler.models import SearchRequest


class SearchConfig(BaseModel):
    """Конфигурация для одного запуска поиска."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(
        "http://gcsweb.k8s.io/",
        validate_default=True,
        description="Хост веб-интерфейса листингов.",
    )
    root_path: str = Field(
        "/gcs/kubernetes-jenkins/logs/", min_length=1, description="Каталог, с которого начинается обход."
    )
    file_name: str = Field("serial-1.log", min_length=1, description="Имя файла, в котором ищется текст.")
    pattern: str = Field(
        "watchdog: BUG: soft lockup - CPU#", description="Искомая строка (не регулярное выражение)."
    )
    timeout: Optional[float] = Field(None, gt=0, description="Таймаут на один запрос (секунд).")

    @field_validator("base_url", mode="before")
    def _ensure_trailing_slash(cls, v: Any) -> Any:
        # относительные пути разрешаются от base_url через urljoin
        if isinstance(v, str):
            return v.strip().rstrip("/") + "/"
        return v

    @property
    def request(self) -> SearchRequest:
        return SearchRequest(
            root_location=self.root_path,
            target_file_name=self.file_name,
            text_pattern=self.pattern,
        )


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> SearchConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект SearchConfig.
    Без пути берёт configs/default.yaml, а если его нет, значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return SearchConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return SearchConfig(**data)


def override_config(cfg: SearchConfig, **overrides: Any) -> SearchConfig:
    """Возвращает новый SearchConfig с заменёнными полями (None пропускается)."""
    updates = {k: v for k, v in overrides.items() if v is not None}
    if not updates:
        return cfg
    data = cfg.model_dump(mode="json")
    data.update(updates)
    return SearchConfig(**data)


__all__ = ["SearchConfig", "ValidationError", "load_config", "override_config"]
