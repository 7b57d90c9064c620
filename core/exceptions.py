"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種轉換失敗都有明確的分類與訊息。
上層可以 catch 大類別 (如 ConverterError)，
也可以精準 catch 子類別 (如 MalformedInputError)。

Exception 樹：
    ConverterError
    ├── ConversionInputError
    │   ├── UnsupportedFileKindError
    │   ├── MissingOrEmptyInputError
    │   └── MalformedInputError
    └── ConfigError
        └── InvalidConfigError

注意：找不到對應規則的 action / activity / validation 不是錯誤，
轉換器只會輸出人工轉換標記，不會拋出例外。
"""


class ConverterError(Exception):
    """轉換器所有例外的基底，catch 這個就能攔截一切轉換錯誤"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.context = context or {}
        super().__init__(message)


# ── 輸入檔案相關 ──

class ConversionInputError(ConverterError):
    """單一輸入檔案無法轉換（只影響該檔，不中斷整批）"""


class UnsupportedFileKindError(ConversionInputError):
    """副檔名不在支援清單內"""

    def __init__(self, extension: str = "", path: str = ""):
        super().__init__(
            f"不支援的檔案類型: {extension or '(無副檔名)'}",
            context={"extension": extension, "path": path},
        )


class MissingOrEmptyInputError(ConversionInputError):
    """檔案不存在或大小為 0"""

    def __init__(self, path: str = "", reason: str = "File not found"):
        self.reason = reason
        super().__init__(f"{reason}: {path}", context={"path": path, "reason": reason})


class MalformedInputError(ConversionInputError):
    """XML 文件解析失敗"""

    def __init__(self, path: str = "", detail: str = ""):
        msg = f"無法解析文件: {path}" if path else "無法解析文件"
        if detail:
            msg += f" ({detail})"
        super().__init__(msg, context={"path": path, "detail": detail})


# ── Config 相關 ──

class ConfigError(ConverterError):
    """設定相關錯誤"""


class InvalidConfigError(ConfigError):
    """設定值無效"""

    def __init__(self, key: str = "", value: str = "", reason: str = ""):
        msg = f"設定值無效: {key}={value}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg, context={"key": key, "value": value})
