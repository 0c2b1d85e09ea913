"""Shared fixtures: cheap Argon2 parameters so hashing tests stay fast."""

from __future__ import annotations

from pathlib import Path

import pytest

from shared.config import HashingConfig, WardenConfig
from shared.logger import WardenLogger
from warden.core.engine import WardenEngine
from warden.hashing.argon import Argon2Hasher

FAST_TOML = """\
[global]
log_level = "WARNING"

[hashing]
time_cost = 1
memory_cost = 8
parallelism = 1
batch_workers = 2
"""


@pytest.fixture
def fast_hashing() -> HashingConfig:
    return HashingConfig(time_cost=1, memory_cost=8, parallelism=1, batch_workers=2)


@pytest.fixture
def test_logger() -> WardenLogger:
    # Propagates so caplog can see records.
    return WardenLogger("test", console_output=False, propagate=True)


@pytest.fixture
def hasher(fast_hashing: HashingConfig, test_logger: WardenLogger) -> Argon2Hasher:
    return Argon2Hasher(fast_hashing, logger=test_logger)


@pytest.fixture
def fast_config(fast_hashing: HashingConfig) -> WardenConfig:
    config = WardenConfig(hashing=fast_hashing)
    config.global_settings.log_level = "WARNING"
    return config


@pytest.fixture
def engine(fast_config: WardenConfig) -> WardenEngine:
    return WardenEngine(fast_config)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "warden.toml"
    path.write_text(FAST_TOML, encoding="utf-8")
    return path
