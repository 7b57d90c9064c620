"""
資料結構定義
Ranorex 測試套件 / 錄製檔 / 步驟定義解析後的統一格式，
以及每個檔案的轉換結果。

所有結構都是不可變的值物件，只在單一檔案的轉換中建立與使用。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePath
from typing import Iterator, Mapping

from core.exceptions import UnsupportedFileKindError

MANUAL_CONVERSION_MARKER = (
    "// TODO: No direct Xamarin.UITest equivalent - Needs manual conversion"
)


class FileKind(Enum):
    SUITE = ".rxtst"       # 測試套件
    RECORDING = ".rxrec"   # 錄製檔
    SOURCE = ".cs"         # C# 程式碼模組

    @classmethod
    def from_path(cls, path: str | PurePath) -> "FileKind":
        """依副檔名（不分大小寫）判斷檔案類型"""
        extension = PurePath(path).suffix.lower()
        for kind in cls:
            if kind.value == extension:
                return kind
        raise UnsupportedFileKindError(extension, str(path))

    @classmethod
    def extensions(cls) -> set[str]:
        return {kind.value for kind in cls}


@dataclass(frozen=True)
class TestCase:
    """套件中的一個測試案例"""
    __test__ = False                       # 不讓 pytest 收集

    name: str
    path: str                              # 步驟定義檔（相對於套件檔）


@dataclass(frozen=True)
class Adapter:
    """元素路徑中的一個辨識條件"""
    id: str = ""
    role: str = ""
    title: str = ""

    def condition(self) -> tuple[str, str] | None:
        """
        依 id > title > role 優先順序取出唯一使用的條件。

        Returns:
            (屬性名, 值)，三者皆空時回傳 None
        """
        if self.id:
            return "id", self.id
        if self.title:
            return "title", self.title
        if self.role:
            return "role", self.role
        return None


@dataclass(frozen=True)
class ElementPath:
    """元素定位路徑，由外而內"""
    adapters: tuple[Adapter, ...] = ()


@dataclass(frozen=True)
class Step:
    """
    一個錄製動作 / activity / validation。

    kind 一律小寫；attributes 保留原始 XML 屬性（含原始大小寫的 type）。
    """
    kind: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    path: ElementPath | None = None
    domain: str = "action"                 # action / activity / validation

    def get(self, key: str) -> str:
        """取屬性值，不存在時回傳空字串"""
        return self.attributes.get(key) or ""


@dataclass(frozen=True)
class TranslationLine:
    """單一步驟的翻譯結果"""
    original_comment: str
    code: str | None = None

    @property
    def mapped(self) -> bool:
        return self.code is not None

    def lines(self) -> Iterator[str]:
        """輸出行：先原始註解，再程式碼或人工轉換標記"""
        yield from self.original_comment.splitlines()
        yield self.code if self.code is not None else MANUAL_CONVERSION_MARKER


class ConversionStatus(Enum):
    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class ConversionResult:
    """單一檔案的轉換結果"""
    path: str
    status: ConversionStatus
    kind: FileKind | None = None
    reason: str = ""
    outputs: tuple[str, ...] = ()          # 已寫出的檔案
    unmapped: int = 0                      # 需人工轉換的步驟數


@dataclass(frozen=True)
class ConversionSummary:
    """整批轉換的統計（由結果列表彙總，不持有可變計數器）"""
    results: tuple[ConversionResult, ...] = ()

    @classmethod
    def of(cls, results) -> "ConversionSummary":
        return cls(tuple(results))

    def _count(self, status: ConversionStatus) -> int:
        return sum(1 for r in self.results if r.status == status)

    @property
    def processed(self) -> int:
        return self._count(ConversionStatus.CONVERTED)

    @property
    def skipped(self) -> int:
        return self._count(ConversionStatus.SKIPPED)

    @property
    def errors(self) -> int:
        return self._count(ConversionStatus.FAILED)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def unmapped(self) -> int:
        return sum(r.unmapped for r in self.results)

    def format(self) -> str:
        return "\n".join([
            "",
            "=== Conversion Summary ===",
            f"Total files processed successfully: {self.processed}",
            f"Files skipped: {self.skipped}",
            f"Files with errors: {self.errors}",
            f"Total files attempted: {self.total}",
            f"Steps needing manual conversion: {self.unmapped}",
            "========================",
        ])
