import json
import logging
import threading

from shared.config import WardenConfig
from shared.logger import WardenLogger


def test_json_file_logging(tmp_path):
    log_file = tmp_path / "logs" / "warden.jsonl"
    log = WardenLogger("jsontest", log_file=log_file, json_logs=True, console_output=False)

    with log.operation("batch_hash"):
        log.warning("%d entries failed", 3, workers=4)
    for handler in log.underlying.handlers:
        handler.flush()

    entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
    assert entry["level"] == "WARNING"
    assert entry["logger"] == "warden.jsontest"
    assert entry["message"] == "3 entries failed"
    assert entry["component"] == "jsontest"
    assert entry["operation"] == "batch_hash"
    assert entry["extra"] == {"workers": 4}


def test_operation_scope_restores():
    log = WardenLogger("scope", console_output=False)
    with log.operation("outer"):
        with log.operation("inner"):
            assert log.current_operation == "inner"
        assert log.current_operation == "outer"
    assert log.current_operation is None


def test_operation_scope_is_per_thread(caplog):
    log = WardenLogger("threads", console_output=False, propagate=True)
    barrier = threading.Barrier(2, timeout=5)
    seen: dict[str, list] = {}

    def run(name):
        with log.operation(name):
            barrier.wait()
            log.info("inside %s", name)
            seen[name] = [log.current_operation]
            barrier.wait()
        seen[name].append(log.current_operation)

    with caplog.at_level(logging.INFO, logger="warden.threads"):
        threads = [threading.Thread(target=run, args=(n,)) for n in ("first", "second")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

    assert seen == {"first": ["first", None], "second": ["second", None]}
    assert len(caplog.records) == 2
    for record in caplog.records:
        assert record.getMessage() == f"inside {record.operation}"
    assert log.current_operation is None


def test_timed_freezes_elapsed():
    log = WardenLogger("timing", console_output=False)
    with log.timed("work") as timer:
        sum(range(1000))
    first = timer.elapsed
    assert first >= 0
    assert timer.elapsed == first


def test_from_config_debug_level():
    config = WardenConfig()
    config.global_settings.debug = True
    log = WardenLogger.from_config("dbg", config)
    assert log.underlying.level == logging.DEBUG
    assert log.component == "dbg"


def test_reinstantiation_does_not_stack_handlers():
    WardenLogger("stack")
    log = WardenLogger("stack")
    assert len(log.underlying.handlers) == 1
