# File: robots_scout/report/__init__.py
"""robots_scout.report: Отчёты о решениях allow/deny, используемые CLI и тестами."""

from robots_scout.report.json_report import CheckReport, PathDecision, check_paths, render_json

__all__ = ["CheckReport", "PathDecision", "check_paths", "render_json"]
