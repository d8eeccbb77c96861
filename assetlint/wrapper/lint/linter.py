"""
AssetLint 主类模块

负责执行资源命名检查、建议名输出、批量重命名和违规日志导出。
"""
import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

from ...core.lint.asset_linter import AssetNameLinter
from ...core.lint.asset_store import ProjectAssetStore
from ...core.lint.config import LintSettings, load_active_settings
from ...core.lint.errors import ConfigError
from ...core.lint.renamer import AssetRenamer, build_operations
from ...core.lint.reporter import Reporter
from ...core.lint.rule_engine import RuleEngine
from ...core.lint.violation_logger import get_available_loggers
from ...lib.logger import (
    get_logger,
    get_current_log_file,
    log_function,
    log_lint_start,
    log_lint_end,
    LogContext,
)


class AssetLint:
    """AssetLint 主类"""

    def __init__(self, args: argparse.Namespace):
        self.args = args
        self.project_root = Path(args.project_root).resolve()
        self.settings: Optional[LintSettings] = None
        self.engine: Optional[RuleEngine] = None
        self.store: Optional[ProjectAssetStore] = None
        self.reporter = Reporter()
        self.logger = get_logger("assetlint")
        self.phase_timings: Dict[str, float] = {}
        self.start_time = time.time()

    def run(self) -> int:
        """执行检查，返回退出码"""
        if self.args.verbose:
            self.logger.enable_console(logging.DEBUG)
        self.logger.debug(f"Arguments: {vars(self.args)}")

        # 1. 加载设置
        with LogContext(self.logger, "config_loading", self.phase_timings):
            try:
                self.settings = self._load_settings()
            except ConfigError as e:
                self.logger.error(f"Config error: {e}")
                print(f"Config error: {e}", file=sys.stderr)
                return 1

        if self.settings is None:
            print("No active linting settings, nothing to check.", file=sys.stderr)
            return 0

        # 2. 创建规则引擎和资源存储
        with LogContext(self.logger, "rule_loading", self.phase_timings):
            self.engine = RuleEngine.from_settings(self.settings, str(self.project_root))
            self.store = ProjectAssetStore(
                str(self.project_root),
                type_overrides=self.settings.type_overrides,
                included=self.settings.included,
                excluded=self.settings.excluded,
            )

        if self.args.verbose:
            print(f"Running {len(self.engine.rules)} naming rules...", file=sys.stderr)
            for rule in self.engine.rules:
                print(f"  - {rule!r}", file=sys.stderr)

        # 3. 获取要检查的资源
        with LogContext(self.logger, "asset_discovery", self.phase_timings):
            asset_paths = self._get_assets_to_check()

        log_lint_start(str(self.project_root), len(asset_paths), batch_mode=bool(self.args.files))
        self.logger.log_list("Assets", asset_paths, level="debug")

        # 4. 检查
        linter = AssetNameLinter(self.engine, self.store, self.reporter)
        with LogContext(self.logger, "asset_name_check", self.phase_timings):
            violation_count = linter.lint_batch(asset_paths, set())

        # 5. 导出违规日志
        if self.args.export_log:
            with LogContext(self.logger, "violation_log_export", self.phase_timings):
                self._export_log(linter)

        # 6. 批量重命名
        if self.args.rename and self.reporter.violations:
            with LogContext(self.logger, "rename", self.phase_timings):
                self._rename_violations(linter)

        elapsed = time.time() - self.start_time
        log_lint_end(violation_count, elapsed)
        self.logger.log_timings(self.phase_timings, level="debug")

        # 7. 输出结果
        self.reporter.deduplicate()
        self.reporter.sort()

        if self.args.json_output:
            print(self.reporter.to_json(extra={"project_root": str(self.project_root)}))
            exit_code = 1 if self.reporter.violations else 0
        elif self.args.suggest:
            for v in self.reporter.violations:
                print(f"{v.asset_path}: {v.asset_name} -> {v.suggested_name}")
            exit_code = 1 if self.reporter.violations else 0
        else:
            exit_code = self.reporter.report()

        if self.args.verbose:
            self.reporter.print_summary()
            print(f"Log file: {get_current_log_file('assetlint')}", file=sys.stderr)

        return exit_code if self.settings.fail_on_violation and not self.args.rename else 0

    def _load_settings(self) -> Optional[LintSettings]:
        """加载启用的设置"""
        config_path = self.args.config
        if config_path and not os.path.isabs(config_path):
            config_path = str(self.project_root / config_path)

        settings = load_active_settings(str(self.project_root), config_path)
        if settings is None:
            return None

        self.logger.info(f"Settings loaded from: {settings.source_path or '<defaults>'}")
        self.logger.debug(f"Ignore script assets: {settings.ignore_script_assets}, "
                          f"warn on incorrect: {settings.warn_on_incorrect}")
        self.logger.debug(f"Ignored paths: {settings.ignored_paths}")
        return settings

    def _get_assets_to_check(self) -> List[str]:
        """获取要检查的资源路径（相对工程根目录）"""
        if not self.args.files:
            return self.store.list_all_asset_paths()

        asset_paths = []
        for f in self.args.files:
            path = Path(f)
            if not path.is_absolute():
                path = self.project_root / f
            path = path.resolve()
            if not path.is_file():
                self.logger.debug(f"Skipped missing asset: {f}")
                continue
            try:
                asset_paths.append(path.relative_to(self.project_root).as_posix())
            except ValueError:
                self.logger.warning(f"Asset outside project root: {f}")
        return asset_paths

    def _export_log(self, linter: AssetNameLinter):
        """导出违规日志"""
        logger_class = get_available_loggers().get(self.args.export_log)
        if logger_class is None:
            self.logger.error(f"Unknown violation logger: {self.args.export_log}")
            return
        log_dir = Path(self.settings.log_dir)
        if not log_dir.is_absolute():
            log_dir = self.project_root / log_dir
        log_path = linter.log_violating_assets(logger_class(str(log_dir)))
        print(f"Violation log written to: {log_path}", file=sys.stderr)

    @log_function("assetlint")
    def _rename_violations(self, linter: AssetNameLinter):
        """将违规资源重命名为建议名称"""
        paths = [v.asset_path for v in self.reporter.violations]
        operations = build_operations(paths, linter.suggest_for_path)
        for operation in operations:
            operation.use_suggested_name()

        renamer = AssetRenamer(self.store, active_document=self.args.active_document)
        summary = renamer.rename_all(operations)
        print(str(summary), file=sys.stderr)
