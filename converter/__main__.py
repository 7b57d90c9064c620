"""
CLI 入口

用法:
    # 轉換整個 Ranorex 專案目錄
    python -m converter path/to/ranorex/project

    # 轉換單一檔案並指定輸出目錄
    python -m converter Login.rxrec --output ~/XamarinTests

    # 從 JSON 設定檔讀取 namespace / 版本等設定
    python -m converter path/to/project --config converter.json

    # 印出範例 JSON 設定檔
    python -m converter --example-config > converter.json
"""

import argparse
import json
import sys

from config.config import Config, ConverterConfig
from core.exceptions import ConfigError
from converter.engine import ConversionEngine


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m converter",
        description="Ranorex → Xamarin.UITest 測試轉換器",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
範例:
  python -m converter ./RanorexProject                  # 轉換整個目錄
  python -m converter Login.rxrec --output ./out        # 單一檔案
  python -m converter --example-config                  # 印出範例設定檔
""",
    )
    parser.add_argument(
        "input", nargs="?",
        help="Ranorex 專案目錄或單一檔案 (.rxtst / .rxrec / .cs)",
    )
    parser.add_argument("--output", help="輸出目錄 (預設 ./XamarinTests)")
    parser.add_argument("--log", help="log 檔路徑 (預設 <output>/conversion_log.txt)")
    parser.add_argument("--config", help="JSON 設定檔路徑")
    parser.add_argument(
        "--platform", choices=["android", "ios"],
        help="BaseTestFixture 啟動的平台",
    )
    parser.add_argument(
        "--example-config", action="store_true",
        help="印出範例 JSON 設定檔",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # 印範例
    if args.example_config:
        print(json.dumps(ConverterConfig().to_dict(), indent=4, ensure_ascii=False))
        return 0

    if not args.input:
        parser.error("必須指定 input")

    try:
        config = Config.load(
            args.config,
            output_dir=args.output,
            log_path=args.log,
            platform=args.platform,
        )
    except (ConfigError, FileNotFoundError, json.JSONDecodeError) as e:
        print(f"設定錯誤: {e}", file=sys.stderr)
        return 2

    engine = ConversionEngine(config)
    summary = engine.run(args.input)

    print(f"共轉換 {summary.processed} 個檔案，略過 {summary.skipped} 個，失敗 {summary.errors} 個。")
    return 1 if summary.errors else 0


if __name__ == "__main__":
    sys.exit(main())
