"""
日誌模組
統一的 logging 設定，輸出到 console，轉換時再掛上 log 檔。

支援：
- Console 輸出（人類可讀格式）
- 轉換 log 檔（純文字 + 可選 JSON 結構化格式）
- 環境變數控制:
    LOG_LEVEL: console 日誌等級 (預設 INFO)
    LOG_JSON: 設為 "1" 啟用 JSON 結構化日誌檔
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path

LOGGER_NAME = "ranorex_converter"

_FORMAT = logging.Formatter(
    "[%(asctime)s] %(levelname)-7s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


class JsonFormatter(logging.Formatter):
    """JSON 結構化日誌格式器，適合 ELK / Loki 等日誌系統"""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def _create_logger() -> logging.Logger:
    _logger = logging.Logger(LOGGER_NAME)
    _logger.setLevel(logging.DEBUG)

    console_level = getattr(
        logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO
    )

    # Console handler（人類可讀）
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(console_level)
    console.setFormatter(_FORMAT)
    _logger.addHandler(console)

    return _logger


def attach_log_file(path: str | Path) -> list[logging.Handler]:
    """
    掛上轉換 log 檔（每次執行重新建立）。

    Args:
        path: log 檔路徑，父目錄不存在時自動建立

    Returns:
        新增的 handler 列表，結束時交給 detach_handlers() 移除
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        f"Conversion started at: {datetime.now():%Y-%m-%d %H:%M:%S}\n",
        encoding="utf-8",
    )

    handlers: list[logging.Handler] = []

    # File handler（純文字）
    file_handler = logging.FileHandler(path, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(_FORMAT)
    handlers.append(file_handler)

    # JSON file handler（可選，設 LOG_JSON=1 啟用）
    if os.getenv("LOG_JSON", "").strip() == "1":
        json_handler = logging.FileHandler(
            path.with_suffix(".json.log"), mode="w", encoding="utf-8"
        )
        json_handler.setLevel(logging.DEBUG)
        json_handler.setFormatter(JsonFormatter())
        handlers.append(json_handler)

    for handler in handlers:
        logger.addHandler(handler)
    return handlers


def detach_handlers(handlers: list[logging.Handler]) -> None:
    """移除並關閉 attach_log_file() 掛上的 handler"""
    for handler in handlers:
        logger.removeHandler(handler)
        handler.close()


logger = _create_logger()
