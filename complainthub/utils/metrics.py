"""Time-series metrics for intents, transport calls and the backend."""
from contextlib import contextmanager
from typing import List, Dict, Any, Iterator, Optional
from collections import defaultdict
import threading
import time


class MetricsCollector:
    """Collects counters, gauges and timings for one component."""

    def __init__(self, service_name: str):
        self.service_name = service_name
        self.metrics: Dict[str, List[Dict[str, Any]]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)
        self.gauges: Dict[str, float] = defaultdict(float)
        self.max_datapoints = 1000
        # Transport calls record from worker threads
        self._lock = threading.Lock()

    def increment(self, metric_name: str, value: int = 1, tags: Dict[str, str] = None):
        with self._lock:
            self.counters[metric_name] += value
        self._add_datapoint(metric_name, value, "counter", tags)

    def gauge(self, metric_name: str, value: float, tags: Dict[str, str] = None):
        with self._lock:
            self.gauges[metric_name] = value
        self._add_datapoint(metric_name, value, "gauge", tags)

    def timing(self, metric_name: str, duration_ms: float, tags: Dict[str, str] = None):
        self._add_datapoint(metric_name, duration_ms, "timing", tags)

    @contextmanager
    def timed(self, metric_name: str, tags: Dict[str, str] = None) -> Iterator[None]:
        """Record the wall time of the block in milliseconds, even if it raises."""
        start_time = time.time()
        try:
            yield
        finally:
            self.timing(metric_name, (time.time() - start_time) * 1000, tags)

    def _add_datapoint(self, metric_name: str, value: float, metric_type: str, tags: Dict[str, str] = None):
        datapoint = {
            "timestamp": time.time(),
            "value": value,
            "type": metric_type,
            "tags": tags or {}
        }
        with self._lock:
            series = self.metrics[metric_name]
            series.append(datapoint)
            if len(series) > self.max_datapoints:
                del series[:-self.max_datapoints]

    def get_metric_data(self, metric_name: str, time_period_minutes: Optional[int] = 60) -> List[Dict[str, Any]]:
        """Datapoints for one metric; ``None`` means the whole retained history."""
        with self._lock:
            if metric_name not in self.metrics:
                return []
            points = list(self.metrics[metric_name])
        if time_period_minutes is None:
            return points

        cutoff_time = time.time() - (time_period_minutes * 60)
        return [dp for dp in points if dp["timestamp"] >= cutoff_time]

    def get_all_metrics(self, time_period_minutes: Optional[int] = 60) -> Dict[str, Any]:
        with self._lock:
            names = list(self.metrics)
            counters = dict(self.counters)
            gauges = dict(self.gauges)
        result = {
            "service": self.service_name,
            "timestamp": time.time(),
            "counters": counters,
            "gauges": gauges,
            "time_series": {}
        }

        for metric_name in names:
            result["time_series"][metric_name] = self.get_metric_data(metric_name, time_period_minutes)

        return result

    def get_summary(self) -> Dict[str, Any]:
        with self._lock:
            return {
                "service": self.service_name,
                "total_metrics": len(self.metrics),
                "total_counters": len(self.counters),
                "total_gauges": len(self.gauges),
                "counters": dict(self.counters),
                "gauges": dict(self.gauges)
            }
