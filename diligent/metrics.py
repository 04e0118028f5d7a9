"""Benchmark metrics kept in memory and served in the Prometheus text format."""

from __future__ import annotations

import bisect
import logging
import math
import threading
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any

NAMESPACE = "diligent"
CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

_log = logging.getLogger(__name__)


def exponential_buckets(start: float, factor: float, count: int) -> list[float]:
    """Return ``count`` bucket bounds starting at ``start``, each ``factor`` times the last."""
    if count < 1:
        raise ValueError("exponential buckets need a positive count")
    if start <= 0:
        raise ValueError("exponential buckets need a positive start")
    if factor <= 1:
        raise ValueError("exponential buckets need a factor greater than 1")
    bounds = []
    bound = start
    for _ in range(count):
        bounds.append(bound)
        bound *= factor
    return bounds


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == int(value) and abs(value) < 1e15:
        return str(int(value))
    return repr(float(value))


def _escape(value: str) -> str:
    return value.replace("\\", "\\\\").replace("\n", "\\n").replace('"', '\\"')


def _label_text(pairs: list[tuple[str, str]]) -> str:
    if not pairs:
        return ""
    return "{" + ",".join(f'{name}="{_escape(value)}"' for name, value in pairs) + "}"


class _Metric:
    """A metric family, optionally partitioned by label values."""

    kind = "untyped"

    def __init__(self, name: str, help_text: str, label_names: tuple[str, ...] = ()) -> None:
        self.name = f"{NAMESPACE}_{name}"
        self.help = help_text
        self.label_names = label_names
        self._lock = threading.Lock()
        self._children: dict[tuple[str, ...], Any] = {} if label_names else {(): self._new()}

    def _new(self) -> Any:
        raise NotImplementedError

    def _child(self, labels: tuple[str, ...]) -> Any:
        if len(labels) != len(self.label_names):
            raise ValueError(
                f"{self.name} expects {len(self.label_names)} label values, got {len(labels)}"
            )
        child = self._children.get(labels)
        if child is None:
            child = self._children[labels] = self._new()
        return child

    def _samples(self, pairs: list[tuple[str, str]], child: Any) -> list[str]:
        raise NotImplementedError

    def render(self) -> list[str]:
        lines = [f"# HELP {self.name} {self.help}", f"# TYPE {self.name} {self.kind}"]
        with self._lock:
            for labels in sorted(self._children):
                pairs = list(zip(self.label_names, labels))
                lines.extend(self._samples(pairs, self._children[labels]))
        return lines


@dataclass
class _Scalar:
    value: float = 0.0


class _Gauge(_Metric):
    kind = "gauge"

    def _new(self) -> _Scalar:
        return _Scalar()

    def set(self, value: float, *labels: str) -> None:
        with self._lock:
            self._child(labels).value = float(value)

    def add(self, amount: float, *labels: str) -> None:
        with self._lock:
            self._child(labels).value += amount

    def _samples(self, pairs: list[tuple[str, str]], child: _Scalar) -> list[str]:
        return [f"{self.name}{_label_text(pairs)} {_format_value(child.value)}"]


class _Counter(_Gauge):
    kind = "counter"

    def add(self, amount: float, *labels: str) -> None:
        if amount < 0:
            raise ValueError("counters cannot decrease")
        super().add(amount, *labels)


@dataclass
class _HistogramState:
    counts: list[int]
    total: float = 0.0
    observations: int = 0


class _Histogram(_Metric):
    kind = "histogram"

    def __init__(
        self,
        name: str,
        help_text: str,
        buckets: list[float],
        label_names: tuple[str, ...] = (),
    ) -> None:
        self.buckets = sorted(buckets)
        super().__init__(name, help_text, label_names)

    def _new(self) -> _HistogramState:
        return _HistogramState(counts=[0] * (len(self.buckets) + 1))

    def observe(self, value: float, *labels: str) -> None:
        with self._lock:
            state = self._child(labels)
            state.counts[bisect.bisect_left(self.buckets, value)] += 1
            state.total += value
            state.observations += 1

    def _samples(self, pairs: list[tuple[str, str]], child: _HistogramState) -> list[str]:
        lines = []
        cumulative = 0
        bounds = [*self.buckets, math.inf]
        for bound, count in zip(bounds, child.counts):
            cumulative += count
            labels = _label_text([*pairs, ("le", _format_value(bound))])
            lines.append(f"{self.name}_bucket{labels} {cumulative}")
        lines.append(f"{self.name}_sum{_label_text(pairs)} {_format_value(child.total)}")
        lines.append(f"{self.name}_count{_label_text(pairs)} {child.observations}")
        return lines


def _parse_addr(addr: str) -> tuple[str, int]:
    host, sep, port = addr.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid metrics address: {addr!r}")
    return host.strip("[]"), int(port)


@dataclass
class DiligentMetrics:
    """The metrics a benchmark run reports, with an HTTP endpoint serving them."""

    metrics_addr: str
    _metrics: list[_Metric] = field(init=False, repr=False)
    _server: ThreadingHTTPServer | None = field(init=False, default=None, repr=False)
    _lock: threading.Lock = field(init=False, default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        buckets = exponential_buckets(0.000001, 2, 30)
        self._config_txns_enabled = _Gauge(
            "config_transaction_enabled",
            "Set to 0 or 1 for transactions disabled, enabled respectively",
        )
        self._config_ops_per_txn = _Gauge("config_batch_size", "Configured batch size (ops / txn)")
        self._config_concurrency = _Gauge("config_concurrency", "Configured concurrency")
        self._concurrency = _Gauge("concurrency", "Actual number of concurrent workers")
        self._stmt_duration = _Histogram(
            "statement_duration_seconds",
            "Histogram of the duration taken to execute SQL statements",
            buckets,
            ("statement",),
        )
        self._txn_duration = _Histogram(
            "transaction_duration_seconds",
            "Histogram of the duration of SQL transactions",
            buckets,
        )
        self._stmt_failures = _Counter(
            "statement_failure", "Counter for failed SQL statements", ("statement",)
        )
        self._stmt_row_mismatches = _Counter(
            "statement_affected_rows_mismatch",
            "Counter for SQL statements with mismatch in affected number of rows",
            ("statement",),
        )
        self._db_connections = _Gauge(
            "db_connections",
            "Number of db connections - max open, open, in use and idle",
            ("label",),
        )
        self._metrics = [
            self._config_txns_enabled,
            self._config_ops_per_txn,
            self._config_concurrency,
            self._concurrency,
            self._stmt_duration,
            self._txn_duration,
            self._stmt_failures,
            self._stmt_row_mismatches,
            self._db_connections,
        ]

    def exposition(self) -> str:
        """Return all metrics in the Prometheus text exposition format."""
        lines = [line for metric in self._metrics for line in metric.render()]
        return "\n".join(lines) + "\n"

    def register(self) -> tuple[str, int]:
        """Start serving ``/metrics`` in the background; return the bound host and port."""
        with self._lock:
            if self._server is not None:
                raise RuntimeError("metrics are already registered")
            host, port = _parse_addr(self.metrics_addr)
            metrics = self

            class _Handler(BaseHTTPRequestHandler):
                def do_GET(self) -> None:  # noqa: N802
                    if self.path.split("?", 1)[0] != "/metrics":
                        self.send_error(404)
                        return
                    body = metrics.exposition().encode("utf-8")
                    self.send_response(200)
                    self.send_header("Content-Type", CONTENT_TYPE)
                    self.send_header("Content-Length", str(len(body)))
                    self.end_headers()
                    self.wfile.write(body)

                def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
                    _log.debug("metrics http %s: " + format, self.address_string(), *args)

            server = ThreadingHTTPServer((host, port), _Handler)
            server.daemon_threads = True
            threading.Thread(target=server.serve_forever, name="metrics-http", daemon=True).start()
            self._server = server
            bound_host, bound_port = server.server_address[:2]
            return str(bound_host), int(bound_port)

    def close(self) -> None:
        """Stop the HTTP endpoint if it is running."""
        with self._lock:
            server, self._server = self._server, None
        if server is not None:
            server.shutdown()
            server.server_close()

    def observe_stmt_duration(self, statement: str, seconds: float) -> None:
        self._stmt_duration.observe(seconds, statement)

    def observe_txn_duration(self, seconds: float) -> None:
        self._txn_duration.observe(seconds)

    def set_config_metrics_for_workload(
        self, txns_enabled: bool, ops_per_txn: int, concurrency: int
    ) -> None:
        self._config_txns_enabled.set(1.0 if txns_enabled else 0.0)
        self._config_ops_per_txn.set(float(ops_per_txn))
        self._config_concurrency.set(float(concurrency))

    def unset_config_metrics_for_workload(self) -> None:
        self._config_txns_enabled.set(0.0)
        self._config_ops_per_txn.set(0.0)
        self._config_concurrency.set(0.0)

    def inc_concurrency_for_workload(self) -> None:
        self._concurrency.add(1.0)

    def dec_concurrency_for_workload(self) -> None:
        self._concurrency.add(-1.0)

    def observe_stmt_failure(self, statement: str) -> None:
        self._stmt_failures.add(1.0, statement)

    def observe_stmt_row_mismatch(self, statement: str) -> None:
        self._stmt_row_mismatches.add(1.0, statement)

    def observe_db_conn(self, stats: Any) -> None:
        """Record pool statistics from an object with ``max_open_connections``,
        ``open_connections``, ``in_use`` and ``idle`` attributes."""
        self._db_connections.set(float(stats.max_open_connections), "maxopen")
        self._db_connections.set(float(stats.open_connections), "open")
        self._db_connections.set(float(stats.in_use), "inuse")
        self._db_connections.set(float(stats.idle), "idle")