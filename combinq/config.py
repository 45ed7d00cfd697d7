from contextlib import contextmanager
from dataclasses import dataclass, asdict, fields, replace
from typing import Iterator


@dataclass(frozen=True)
class LendingConfig:
    """runtime checks applied by lending iterators"""
    check_stale_views: bool = True  # reading a view after the next advance raises
    check_invariants: bool = False  # assert buffer/index consistency after every transition


_config = LendingConfig()


def get_config() -> LendingConfig:
    """current process-wide configuration"""
    return _config


def configure(**overrides) -> LendingConfig:
    """
    replace selected fields of the process-wide configuration.
    enumerators snapshot the configuration when they are built, so changes only
    affect enumerators created afterwards.
    """
    global _config
    known = {f.name for f in fields(LendingConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise TypeError(f"unknown configuration keys: {', '.join(sorted(unknown))}")
    _config = replace(_config, **overrides)
    return _config


@contextmanager
def configured(**overrides) -> Iterator[LendingConfig]:
    """temporarily apply configuration overrides"""
    previous = asdict(_config)
    try:
        yield configure(**overrides)
    finally:
        configure(**previous)
