# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_scout",
    version="0.1.0",
    description="Парсер robots.txt: группы User-Agent, шаблоны путей и Crawl-delay",
    packages=find_packages(include=["robots_scout", "robots_scout.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["robots_scout=robots_scout.cli:cli"],
    },
    python_requires=">=3.11",
)
