"""
Project Writer
在輸出目錄建立 Xamarin.UITest 測試專案骨架（每個輸出目錄只需一次）：
- BaseTestFixture.cs   所有轉換後測試類別共用的基底
- <project>.csproj     NUnit + Xamarin.UITest 套件參考
- Pages/ Tests/        空目錄，留給後續手動整理
"""

from pathlib import Path

from config.config import ConverterConfig

# BaseTestFixture 依平台啟動 App
_CONFIGURE_APP = {
    "android": "ConfigureApp\n                .Android\n                .StartApp();",
    "ios": "ConfigureApp\n                .iOS\n                .StartApp();",
}


class ProjectWriter:
    """產生測試專案骨架到目標目錄"""

    def __init__(self, config: ConverterConfig):
        self.config = config
        self.output = config.output_path

    def build_all(self) -> list[Path]:
        """建立目錄並寫出所有骨架檔，回傳已建立的檔案路徑"""
        self.output.mkdir(parents=True, exist_ok=True)
        (self.output / "Pages").mkdir(exist_ok=True)
        (self.output / "Tests").mkdir(exist_ok=True)

        created = []
        created.append(self._write_base_fixture())
        created.append(self._write_csproj())
        return created

    def base_fixture_source(self) -> str:
        platform = self.config.platform.lower()
        on_android = "true" if platform == "android" else "false"

        return f'''\
using NUnit.Framework;
using Xamarin.UITest;

namespace {self.config.namespace}
{{
    public class {self.config.base_fixture}
    {{
        protected IApp app;
        protected bool OnAndroid = {on_android};

        [SetUp]
        public virtual void BeforeEachTest()
        {{
            app = {_CONFIGURE_APP[platform]}
        }}
    }}
}}
'''

    def csproj_source(self) -> str:
        return f'''\
<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFramework>{self.config.target_framework}</TargetFramework>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="NUnit" Version="{self.config.nunit_version}" />
    <PackageReference Include="Xamarin.UITest" Version="{self.config.uitest_version}" />
  </ItemGroup>
</Project>
'''

    def _write_base_fixture(self) -> Path:
        path = self.output / f"{self.config.base_fixture}.cs"
        path.write_text(self.base_fixture_source(), encoding="utf-8")
        return path

    def _write_csproj(self) -> Path:
        path = self.output / f"{self.config.project_name}.csproj"
        path.write_text(self.csproj_source(), encoding="utf-8")
        return path
