"""Tests for logging and metrics helpers."""
import logging
import threading

from complainthub.utils.logger import ServiceLogger
from complainthub.utils.metrics import MetricsCollector


def test_logger_buffers_structured_entries(tmp_path):
    logger = ServiceLogger("test-buffer", log_dir=str(tmp_path))
    logger.info("Complaint registered", complaint_id="COMP-1")

    entry = logger.get_recent_logs(limit=1)[0]
    assert entry["level"] == "INFO"
    assert entry["message"] == "Complaint registered"
    assert entry["extra"] == {"complaint_id": "COMP-1"}
    assert (tmp_path / "test-buffer.log").exists()


def test_logger_buffer_is_bounded(tmp_path):
    logger = ServiceLogger("test-bounded", log_dir=str(tmp_path))
    for i in range(150):
        logger.debug(f"line {i}")
    assert len(logger.log_buffer) == 100
    assert logger.get_recent_logs(limit=1)[0]["message"] == "line 149"
    assert logger.get_recent_logs(limit=0) == []

    logger.clear_logs()
    assert logger.get_recent_logs() == []


def test_handlers_attached_once(tmp_path):
    ServiceLogger("test-once", log_dir=str(tmp_path))
    ServiceLogger("test-once", log_dir=str(tmp_path))
    assert len(logging.getLogger("test-once").handlers) == 2


def test_metrics_counters_gauges_and_timings():
    metrics = MetricsCollector("lifecycle")
    metrics.increment("refresh_succeeded")
    metrics.increment("refresh_succeeded")
    metrics.gauge("complaints_known", 3)
    metrics.timing("refresh_duration", 12.5)

    summary = metrics.get_summary()
    assert summary["counters"] == {"refresh_succeeded": 2}
    assert summary["gauges"] == {"complaints_known": 3}

    everything = metrics.get_all_metrics(time_period_minutes=None)
    assert everything["service"] == "lifecycle"
    assert len(everything["time_series"]["refresh_succeeded"]) == 2
    assert metrics.get_metric_data("refresh_duration")[0]["value"] == 12.5
    assert metrics.get_metric_data("unknown") == []


def test_metrics_datapoints_are_bounded():
    metrics = MetricsCollector("transport")
    metrics.max_datapoints = 5
    for _ in range(8):
        metrics.increment("requests_total")
    assert len(metrics.metrics["requests_total"]) == 5
    assert metrics.counters["requests_total"] == 8


def run_in_threads(target, threads=8):
    workers = [threading.Thread(target=target) for _ in range(threads)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()


def test_metrics_survive_concurrent_writers():
    metrics = MetricsCollector("transport")
    metrics.max_datapoints = 50

    def record():
        for _ in range(500):
            metrics.increment("requests_total")
            metrics.timing("list_duration", 1.0)

    run_in_threads(record)

    assert metrics.counters["requests_total"] == 4000
    assert len(metrics.metrics["requests_total"]) == 50
    assert len(metrics.get_metric_data("list_duration", None)) == 50


def test_log_buffer_survives_concurrent_writers(tmp_path):
    logger = ServiceLogger("test-threads", log_dir=str(tmp_path))
    seen = []

    def record():
        for i in range(200):
            logger.debug(f"line {i}")
        seen.append(len(logger.get_recent_logs(limit=100)))

    run_in_threads(record)

    assert len(logger.log_buffer) == 100
    assert all(n == 100 for n in seen)
