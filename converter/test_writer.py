"""
Test Writer
把解析後的 Ranorex 步驟組成 Xamarin.UITest 測試類別原始碼，
以及對既有 C# 程式碼做文字替換。

這裡只產生文字，不碰檔案系統；讀寫由 ConversionEngine 負責。
輸出順序與來源文件完全一致，不排序、不去重。
"""

import re
from pathlib import PurePath
from typing import Callable, Iterable

from config.config import ConverterConfig
from converter.locator import build_locator
from converter.parser import parse_module, parse_recording, parse_suite
from converter.schema import MANUAL_CONVERSION_MARKER, Step, TranslationLine
from converter.translator import (
    translate_action, translate_activity, translate_validation,
)

USINGS = (
    "System",
    "System.Linq",
    "NUnit.Framework",
    "Xamarin.UITest",
    "Xamarin.UITest.Queries",
)

# repo.<Item>.Click() → app.Tap(x => x.Marked("<Item>"))
_REPO_CLICK = re.compile(r"repo\.([A-Za-z0-9_]+)\.Click\(\)")


def translate_step(step: Step) -> TranslationLine:
    """依步驟來源 (action / activity / validation) 分派到對應的 translator"""
    if step.domain == "validation":
        return translate_validation(
            step.get("type") or step.kind, step.get("compare"), step.get("elementId"),
        )
    if step.domain == "activity":
        return translate_activity(step.kind, step.attributes)
    return translate_action(step.kind, step.attributes, build_locator(step.path))


def count_unmapped(code: str) -> int:
    """已產生的原始碼中，需人工轉換的步驟數"""
    return code.count(MANUAL_CONVERSION_MARKER)


def rewrite_source(code: str) -> str:
    """
    Ranorex C# 程式碼 → Xamarin.UITest。

    只處理兩條固定規則（namespace、repo 元素點擊），其餘原樣保留。
    重複執行不會再改變結果。
    """
    code = code.replace("using Ranorex;", "using Xamarin.UITest;")
    return _REPO_CLICK.sub(r'app.Tap(x => x.Marked("\1"))', code)


class TestWriter:
    """產生 Xamarin.UITest 測試 .cs 原始碼"""
    __test__ = False

    def __init__(self, config: ConverterConfig):
        self.config = config

    def render_class(self, class_name: str, translations: Iterable[TranslationLine]) -> str:
        """組出完整的測試檔：using + namespace + [TestFixture] 類別 + 單一 [Test] 方法"""
        lines: list[str] = []

        # --- header ---
        for namespace in USINGS:
            lines.append(f'using {namespace};')
        lines.append(f'')
        lines.append(f'namespace {self.config.namespace}')
        lines.append(f'{{')

        # --- Test class ---
        lines.append(f'    [TestFixture]')
        lines.append(f'    public class {class_name} : {self.config.base_fixture}')
        lines.append(f'    {{')
        lines.append(f'        [Test]')
        lines.append(f'        public void {class_name}Main()')
        lines.append(f'        {{')

        for translation in translations:
            for line in translation.lines():
                lines.append(f'            {line}')

        lines.append(f'        }}')
        lines.append(f'    }}')
        lines.append(f'}}')
        lines.append(f'')
        return "\n".join(lines)

    def convert_recording(self, text: str, name: str, source: str = "") -> str:
        """
        .rxrec → 單一測試類別。

        Args:
            text: 錄製檔 XML
            name: 檔名（不含副檔名），類別名為 <name>Tests

        Raises:
            MalformedInputError: XML 無法解析
        """
        steps = parse_recording(text, source)
        class_name = self.class_name_for(name)
        return self.render_class(class_name, (translate_step(s) for s in steps))

    def convert_suite(
        self,
        text: str,
        load_module: Callable[[str], str],
        source: str = "",
    ) -> list[tuple[str, str]]:
        """
        .rxtst → 每個 test case 一個測試類別。

        Args:
            text: 套件 XML
            load_module: 依 test case 的 path 讀回步驟定義 XML

        Returns:
            [(輸出檔名, 原始碼), ...]，順序同套件

        Raises:
            MalformedInputError: 套件或任一步驟定義無法解析
        """
        outputs = []
        for test_case in parse_suite(text, source):
            steps = parse_module(load_module(test_case.path), test_case.path)
            class_name = self.class_name_for(test_case.name or PurePath(test_case.path).stem)
            code = self.render_class(class_name, (translate_step(s) for s in steps))
            outputs.append((f"{class_name}.cs", code))
        return outputs

    def convert_source(self, text: str) -> str:
        """.cs → 同名檔案，僅做文字替換"""
        return rewrite_source(text)

    def class_name_for(self, name: str) -> str:
        """<name>Tests"""
        return self.to_class_name(name) + "Tests"

    @staticmethod
    def to_class_name(name: str) -> str:
        """轉成合法的 C# 識別字"""
        ident = re.sub(r"\W", "", name)
        if not ident:
            return "Unnamed"
        if ident[0].isdigit():
            ident = "_" + ident
        return ident
