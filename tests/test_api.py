import logging
from logging.handlers import RotatingFileHandler

import pytest

import warden
from shared.config import WardenConfig
from warden.core.engine import WardenEngine


@pytest.fixture(autouse=True)
def fast_shared_hasher(fast_config):
    warden.get_hasher(fast_config)


def test_public_surface():
    for name in (
        "check_password_policy",
        "hash_password",
        "verify_password_hash",
        "batch_hash_passwords",
        "hash_password_sha1",
    ):
        assert callable(getattr(warden, name))
    assert warden.ERROR_SENTINEL == "ERROR"


def test_round_trip_through_api():
    stored = warden.hash_password("")
    assert warden.verify_password_hash("", stored)
    assert not warden.verify_password_hash("x", stored)
    assert not warden.needs_rehash(stored)


def test_batch_through_api():
    result = warden.batch_hash_passwords(["p", "q", "p"])
    assert set(result) == {"p", "q"}
    outcomes = warden.batch_hash_outcomes(["p"])
    assert outcomes["p"].ok


def test_sha1_through_api():
    assert warden.hash_password_sha1("password") == "5BAA61E4C9B93F3F0682250B6CF8331B7EE68FD8"


def test_get_hasher_is_shared():
    assert warden.get_hasher() is warden.get_hasher()
    replaced = warden.get_hasher(WardenConfig())
    assert warden.get_hasher() is replaced


def test_shared_hasher_logs_with_global_settings(fast_config, tmp_path):
    fast_config.global_settings.log_file = str(tmp_path / "warden.log")
    engine = WardenEngine(fast_config)

    shared = warden.get_hasher(fast_config)
    api_logger = shared.logger.underlying
    assert api_logger.name == "warden.api"
    assert api_logger.level == logging.WARNING
    assert any(isinstance(h, RotatingFileHandler) for h in api_logger.handlers)

    # The engine's own hashing logger keeps its file handler.
    engine_handlers = engine.hasher.logger.underlying.handlers
    assert any(isinstance(h, RotatingFileHandler) for h in engine_handlers)
