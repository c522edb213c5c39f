"""Shared FastAPI dependencies for API routers."""
from functools import lru_cache

from dutcheck.engine.auto_runner import AutoRunScheduler
from dutcheck.engine.test_runner import TestRunner


@lru_cache(maxsize=1)
def get_runner() -> TestRunner:
    return TestRunner()


@lru_cache(maxsize=1)
def get_scheduler() -> AutoRunScheduler:
    return AutoRunScheduler(get_runner())
