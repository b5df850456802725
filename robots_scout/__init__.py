# robots_scout/__init__.py
"""
RobotsScout package initializer.
Defines package version and exposes the robots.txt API.
"""
__version__ = "0.1.0"

from robots_scout.robots import Robots, build
from robots_scout.rules import Rule, RuleKind, compile_rule

__all__ = ["__version__", "Robots", "Rule", "RuleKind", "build", "compile_rule"]
