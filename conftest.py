"""
pytest 全域 fixtures

提供：
- config fixture：輸出目錄指向 tmp_path 的 ConverterConfig
- engine / writer fixture
- ranorex_project fixture：含套件、步驟定義、錄製檔與 C# 模組的模擬專案
"""

import textwrap
from pathlib import Path

import pytest

from config.config import Config
from converter.engine import ConversionEngine
from converter.test_writer import TestWriter


RECORDING_XML = textwrap.dedent("""\
    <?xml version="1.0" encoding="utf-8"?>
    <recording name="Login">
      <action type="Click" varname="btn">
        <path>
          <adapter id="LoginButton" role="button" title="Log in"/>
        </path>
      </action>
      <action type="MoveMouse"/>
      <action type="Keyboard" value="{Return}"/>
    </recording>
""")

SUITE_XML = textwrap.dedent("""\
    <?xml version="1.0" encoding="utf-8"?>
    <testsuite name="Smoke">
      <test type="folder" name="Setup"/>
      <test type="testcase" name="Login" path="Modules/Login.rxtmg"/>
      <test type="testcase" name="Logout" path="Modules/Logout.rxtmg"/>
    </testsuite>
""")

LOGIN_MODULE_XML = textwrap.dedent("""\
    <module name="Login">
      <activity type="SetValue" target="UserName" value="bob"/>
      <activity type="Click" target="LoginButton"/>
      <validation type="Equals" compare="Welcome" elementid="Header"/>
      <activity type="ExecuteScript" script="Report.Log(&quot;done&quot;);"/>
    </module>
""")

LOGOUT_MODULE_XML = textwrap.dedent("""\
    <module name="Logout">
      <activity type="Wait" target="Menu" timeout="1500"/>
      <activity type="Touch" target="LogoutButton"/>
      <validation type="NotExists" elementid="Header"/>
    </module>
""")

SOURCE_CS = textwrap.dedent("""\
    using System;
    using Ranorex;

    public class LoginHelper
    {
        public void Run()
        {
            repo.LoginButton.Click();
        }
    }
""")


@pytest.fixture
def config(tmp_path):
    """輸出到 tmp_path/out 的設定"""
    return Config.load(output_dir=str(tmp_path / "out"))


@pytest.fixture
def writer(config):
    return TestWriter(config)


@pytest.fixture
def engine(config):
    return ConversionEngine(config)


@pytest.fixture
def ranorex_project(tmp_path) -> Path:
    """建立一個模擬的 Ranorex 專案結構"""
    project = tmp_path / "ranorex"
    modules = project / "Modules"
    modules.mkdir(parents=True)

    (project / "Smoke.rxtst").write_text(SUITE_XML, encoding="utf-8")
    (modules / "Login.rxtmg").write_text(LOGIN_MODULE_XML, encoding="utf-8")
    (modules / "Logout.rxtmg").write_text(LOGOUT_MODULE_XML, encoding="utf-8")
    (project / "Signin.rxrec").write_text(RECORDING_XML, encoding="utf-8")
    (project / "LoginHelper.cs").write_text(SOURCE_CS, encoding="utf-8")
    (project / "README.txt").write_text("not a ranorex file", encoding="utf-8")
    return project


@pytest.fixture
def recording_xml() -> str:
    return RECORDING_XML


@pytest.fixture
def suite_xml() -> str:
    return SUITE_XML


@pytest.fixture
def modules() -> dict[str, str]:
    """suite 中 test case path → 步驟定義 XML"""
    return {
        "Modules/Login.rxtmg": LOGIN_MODULE_XML,
        "Modules/Logout.rxtmg": LOGOUT_MODULE_XML,
    }


@pytest.fixture
def source_cs() -> str:
    return SOURCE_CS
