"""
設定管理模組
統一管理輸出目錄、log 檔、目標專案名稱與 NuGet 版本等設定。
支援透過 JSON 設定檔與環境變數覆蓋預設值，方便 CI/CD 整合。

設定查找順序：
    1. 呼叫端明確傳入的 overrides (最高優先)
    2. 環境變數 (CONVERTER_*)
    3. JSON 設定檔 (--config)
    4. 程式碼內建預設值
"""

import json
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path

from core.exceptions import InvalidConfigError

SUPPORTED_PLATFORMS = ("android", "ios")

# 欄位 → 環境變數
_ENV_KEYS = {
    "output_dir": "CONVERTER_OUTPUT_DIR",
    "log_path": "CONVERTER_LOG_PATH",
    "namespace": "CONVERTER_NAMESPACE",
    "base_fixture": "CONVERTER_BASE_FIXTURE",
    "platform": "CONVERTER_PLATFORM",
    "project_name": "CONVERTER_PROJECT_NAME",
    "target_framework": "CONVERTER_TARGET_FRAMEWORK",
    "nunit_version": "CONVERTER_NUNIT_VERSION",
    "uitest_version": "CONVERTER_UITEST_VERSION",
}


@dataclass(frozen=True)
class ConverterConfig:
    """單次轉換使用的設定"""
    output_dir: str = "./XamarinTests"
    log_path: str = ""                     # 空字串 → <output_dir>/conversion_log.txt
    namespace: str = "XamarinTests"
    base_fixture: str = "BaseTestFixture"
    platform: str = "android"              # BaseTestFixture 啟動的平台
    project_name: str = "XamarinTests"     # .csproj 檔名
    target_framework: str = "netcoreapp3.1"
    nunit_version: str = "3.13.2"
    uitest_version: str = "3.2.2"

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)

    @property
    def log_file(self) -> Path:
        if self.log_path:
            return Path(self.log_path)
        return self.output_path / "conversion_log.txt"

    def to_dict(self) -> dict:
        return asdict(self)


class Config:
    """設定載入與驗證"""

    @classmethod
    def load(cls, path: str | Path | None = None, **overrides) -> ConverterConfig:
        """
        合併預設值、JSON 設定檔、環境變數與 overrides。

        Args:
            path: JSON 設定檔路徑（可省略）
            **overrides: 明確指定的欄位值，值為 None 時忽略

        Returns:
            驗證過的 ConverterConfig

        Raises:
            FileNotFoundError: 指定的設定檔不存在
            InvalidConfigError: 有未知欄位或值無效
        """
        values: dict = {}

        if path:
            config_file = Path(path)
            if not config_file.exists():
                raise FileNotFoundError(f"找不到設定檔: {config_file}")
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise InvalidConfigError(str(config_file), type(data).__name__,
                                         "設定檔必須是 JSON object")
            values.update(data)

        for key, env_key in _ENV_KEYS.items():
            env_val = os.getenv(env_key)
            if env_val is not None:
                values[key] = env_val

        values.update({k: v for k, v in overrides.items() if v is not None})

        known = {f.name for f in fields(ConverterConfig)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise InvalidConfigError(unknown[0], str(values[unknown[0]]), "未知的設定欄位")

        config = replace(ConverterConfig(), **{k: str(v) for k, v in values.items()})
        cls.validate(config)
        return config

    @classmethod
    def validate(cls, config: ConverterConfig) -> None:
        """
        驗證設定值。

        Raises:
            InvalidConfigError: platform 不支援、或名稱欄位為空
        """
        if config.platform.lower() not in SUPPORTED_PLATFORMS:
            raise InvalidConfigError(
                "platform", config.platform,
                f"必須是 {' / '.join(SUPPORTED_PLATFORMS)}",
            )
        for key in ("output_dir", "namespace", "base_fixture", "project_name"):
            if not getattr(config, key).strip():
                raise InvalidConfigError(key, "", "不可為空")
