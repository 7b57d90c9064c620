"""
Conversion Engine (轉換引擎)
走訪 Ranorex 專案目錄，依副檔名分派到對應的轉換器，並彙總結果。

使用方式：
    1. 程式化呼叫：
        engine = ConversionEngine(Config.load(output_dir="./XamarinTests"))
        summary = engine.run("path/to/ranorex/project")

    2. CLI：
        python -m converter path/to/ranorex/project --output ./XamarinTests

單一檔案失敗（XML 壞掉、步驟檔不存在…）只記錄錯誤，繼續處理下一個檔案。
"""

from pathlib import Path

from config.config import ConverterConfig
from core.exceptions import (
    ConversionInputError, MissingOrEmptyInputError, UnsupportedFileKindError,
)
from converter.project_writer import ProjectWriter
from converter.schema import (
    ConversionResult, ConversionStatus, ConversionSummary, FileKind,
)
from converter.test_writer import TestWriter, count_unmapped
from utils.logger import attach_log_file, detach_handlers, logger


def validate_input(path: Path) -> None:
    """
    Raises:
        MissingOrEmptyInputError: 檔案不存在或大小為 0
    """
    if not path.is_file():
        raise MissingOrEmptyInputError(str(path), "File not found")
    if path.stat().st_size == 0:
        raise MissingOrEmptyInputError(str(path), "Empty file")


class ConversionEngine:
    """Ranorex → Xamarin.UITest 轉換引擎"""

    def __init__(self, config: ConverterConfig):
        self.config = config
        self.output = config.output_path
        self.writer = TestWriter(config)
        self._project_ready = False

    # ── 入口 ──

    def run(self, input_path: str | Path) -> ConversionSummary:
        """目錄 → process_directory；單一檔案 → convert_file，皆寫 log 檔"""
        input_path = Path(input_path)
        if input_path.is_dir():
            return self.process_directory(input_path)

        handlers = attach_log_file(self.config.log_file)
        try:
            summary = ConversionSummary.of([self.convert_file(input_path)])
            logger.info(summary.format())
            return summary
        finally:
            detach_handlers(handlers)

    def process_directory(self, directory: str | Path) -> ConversionSummary:
        """
        遞迴處理目錄下所有支援的檔案。

        Returns:
            ConversionSummary

        Raises:
            NotADirectoryError: directory 不是目錄
        """
        root = Path(directory)
        if not root.is_dir():
            raise NotADirectoryError(f"不是目錄: {root}")

        handlers = attach_log_file(self.config.log_file)
        try:
            logger.info(f"開始處理目錄: {root}")
            files = self._collect(root)
            results = [self.convert_file(path) for path in files]
            summary = ConversionSummary.of(results)
            logger.info(summary.format())
            return summary
        finally:
            detach_handlers(handlers)

    def convert_file(self, path: str | Path) -> ConversionResult:
        """轉換單一檔案，任何單檔錯誤都轉為 SKIPPED / FAILED 結果"""
        path = Path(path)

        try:
            kind = FileKind.from_path(path)
        except UnsupportedFileKindError as e:
            logger.error(f"略過 {path}: {e}")
            return ConversionResult(str(path), ConversionStatus.SKIPPED, reason=str(e))

        try:
            validate_input(path)
        except MissingOrEmptyInputError as e:
            logger.error(str(e))
            return ConversionResult(str(path), ConversionStatus.SKIPPED, kind, reason=e.reason)

        logger.info(f"處理檔案: {path} ({kind.name.lower()})")
        try:
            outputs, unmapped = self._convert(kind, path)
        except (ConversionInputError, OSError, UnicodeDecodeError) as e:
            logger.error(f"轉換失敗 {path}: {e}", exc_info=True)
            return ConversionResult(str(path), ConversionStatus.FAILED, kind, reason=str(e))

        if unmapped:
            logger.warning(f"{path}: {unmapped} 個步驟需人工轉換")
        logger.info(f"轉換完成: {path}")
        return ConversionResult(
            str(path), ConversionStatus.CONVERTED, kind,
            outputs=tuple(str(p) for p in outputs),
            unmapped=unmapped,
        )

    # ── 內部 ──

    def _collect(self, root: Path) -> list[Path]:
        """支援的檔案（排序，排除輸出目錄本身）"""
        output = self.output.resolve()
        extensions = FileKind.extensions()
        files = []
        for path in sorted(root.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in extensions:
                continue
            if path.resolve().is_relative_to(output):
                continue
            files.append(path)
        return files

    def _convert(self, kind: FileKind, path: Path) -> tuple[list[Path], int]:
        text = path.read_text(encoding="utf-8-sig")

        if kind == FileKind.SOURCE:
            self.output.mkdir(parents=True, exist_ok=True)
            return [self._write(path.name, self.writer.convert_source(text))], 0

        if kind == FileKind.RECORDING:
            generated = [(
                f"{self.writer.class_name_for(path.stem)}.cs",
                self.writer.convert_recording(text, path.stem, str(path)),
            )]
        else:
            generated = self.writer.convert_suite(
                text, lambda module: self._load_module(path, module), str(path),
            )

        self._ensure_project()
        written = [self._write(name, code) for name, code in generated]
        return written, sum(count_unmapped(code) for _, code in generated)

    def _load_module(self, suite_path: Path, module: str) -> str:
        """讀取 test case 指向的步驟定義檔（相對於套件檔）"""
        if not module:
            raise MissingOrEmptyInputError(str(suite_path), "Test case without module path")
        module_path = suite_path.parent / module
        validate_input(module_path)
        return module_path.read_text(encoding="utf-8-sig")

    def _ensure_project(self) -> None:
        if self._project_ready:
            return
        for f in ProjectWriter(self.config).build_all():
            logger.info(f"  ✓ {f.name}")
        self._project_ready = True

    def _write(self, name: str, code: str) -> Path:
        path = self.output / name
        path.write_text(code, encoding="utf-8")
        logger.debug(f"  ✓ {path}")
        return path
