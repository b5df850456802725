# robots_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта RobotsScout.

Решения allow/deny по списку путей сериализуются в файл или строку.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from robots_scout.robots import Robots


@dataclass(slots=True)
class PathDecision:
    """Решение для одного пути и правило, которое его определило."""

    path: str
    allowed: bool
    rule: Optional[str] = None
    rule_kind: Optional[str] = None
    rule_length: Optional[int] = None


@dataclass(slots=True)
class CheckReport:
    """Результат проверки путей для одного User-Agent."""

    user_agent: str
    crawl_delay: float = 0.0
    rules: int = 0
    decisions: List[PathDecision] = field(default_factory=list)

    @property
    def all_allowed(self) -> bool:
        return all(d.allowed for d in self.decisions)

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(asdict(self), ensure_ascii=False, indent=2 if pretty else None)


def check_paths(robots: Robots, user_agent: str, paths: Iterable[str]) -> CheckReport:
    """Проверяет каждый путь и собирает CheckReport."""
    report = CheckReport(
        user_agent=user_agent,
        crawl_delay=robots.crawl_delay.total_seconds(),
        rules=len(robots.rules),
    )
    for path in paths:
        rule = robots.match(path)
        report.decisions.append(
            PathDecision(
                path=path,
                allowed=rule is None or rule.allows,
                rule=rule.source if rule else None,
                rule_kind=rule.kind.value if rule else None,
                rule_length=rule.length if rule else None,
            )
        )
    return report


def render_json(report: CheckReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CheckReport
    :param output_path: путь к JSON-файлу
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=pretty), encoding="utf-8")
    return output
