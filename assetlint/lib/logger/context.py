"""
AssetLint Logger Context

检查阶段的计时上下文。
"""
import time
from typing import Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .python_logger import AssetLintLogger


class LogContext:
    """记录一个检查阶段的开始、结束和耗时

    Usage:
        timings = {}
        with LogContext(logger, "asset_discovery", timings):
            paths = store.list_all_asset_paths()
        # timings == {"asset_discovery": 0.012}
    """

    def __init__(self, logger: "AssetLintLogger", phase: str,
                 timings: Optional[Dict[str, float]] = None):
        """
        Args:
            logger: AssetLintLogger 实例
            phase: 阶段名称
            timings: 可选，阶段名 -> 耗时（秒），退出时写入
        """
        self.logger = logger
        self.phase = phase
        self.timings = timings
        self.elapsed = 0.0
        self._started = 0.0

    def __enter__(self) -> "LogContext":
        self._started = time.perf_counter()
        self.logger.debug(f"[{self.phase}] started")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.elapsed = time.perf_counter() - self._started
        if self.timings is not None:
            self.timings[self.phase] = self.elapsed

        if exc_type is None:
            self.logger.debug(f"[{self.phase}] finished in {self.elapsed:.3f}s")
        else:
            self.logger.exception(f"[{self.phase}] failed after {self.elapsed:.3f}s: {exc_val}")
        return False
