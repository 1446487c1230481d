import logging
from typing import Dict, Optional

from bookshelf.config import STATSD

logger = logging.getLogger("metrics")


class StatsdClient:
    """Statsd-shaped client that emits every sample as a log line."""

    def __init__(self, prefix: str = STATSD.PREFIX):
        self.prefix = prefix

    def timing(
        self,
        metric: str,
        value_ms: float,
        sample_rate: float = 1,
        tags: Optional[Dict[str, str]] = None,
    ):
        logger.info(f"STATSD TIMING: {self._name(metric)}{self._format_tags(tags)} {value_ms:.2f}ms")

    def increment(
        self,
        metric: str,
        value: int = 1,
        sample_rate: float = 1,
        tags: Optional[Dict[str, str]] = None,
    ):
        logger.info(f"STATSD COUNT: {self._name(metric)}{self._format_tags(tags)} +{value}")

    def _name(self, metric: str) -> str:
        return f"{self.prefix}.{self._sanitize_metric(metric)}"

    def _sanitize_metric(self, metric: str) -> str:
        return metric.replace("/", ".").replace("-", "_").replace(" ", "_")

    def _format_tags(self, tags: Optional[Dict[str, str]]) -> str:
        if not tags:
            return ""
        return "," + ",".join(f"{k}:{v}" for k, v in tags.items())


statsd = StatsdClient()
