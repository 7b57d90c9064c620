"""
Ranorex XML 解析
只取出轉換需要的扁平屬性，不做任何語意分析。

    .rxtst  <test type="testcase" name="Login" path="Login.rxtmg"/>
    .rxrec  <action type="Click"><path><adapter id="LoginButton"/></path></action>
    模組    <activity type="SetValue" target="UserName" value="bob"/>
            <validation type="Equals" compare="Welcome" elementid="Header"/>
"""

from xml.etree import ElementTree

from core.exceptions import MalformedInputError
from converter.schema import Adapter, ElementPath, Step, TestCase


def _load(text: str, source: str) -> ElementTree.Element:
    try:
        return ElementTree.fromstring(text)
    except ElementTree.ParseError as e:
        raise MalformedInputError(source, str(e)) from e


def _kind(element: ElementTree.Element) -> str:
    return (element.get("type") or "").lower()


def parse_path(element: ElementTree.Element | None) -> ElementPath | None:
    """<path> → ElementPath；沒有 <path> 時回傳 None"""
    if element is None:
        return None
    return ElementPath(tuple(
        Adapter(
            id=adapter.get("id") or "",
            role=adapter.get("role") or "",
            title=adapter.get("title") or "",
        )
        for adapter in element.findall("adapter")
    ))


def parse_suite(text: str, source: str = "") -> list[TestCase]:
    """取出所有 type="testcase" 的 <test>，保持文件順序"""
    root = _load(text, source)
    return [
        TestCase(name=el.get("name") or "", path=el.get("path") or "")
        for el in root.iter("test")
        if el.get("type") == "testcase"
    ]


def parse_recording(text: str, source: str = "") -> list[Step]:
    """取出所有 <action>，保持錄製順序"""
    root = _load(text, source)
    return [
        Step(
            kind=_kind(el),
            attributes=dict(el.attrib),
            path=parse_path(el.find("path")),
            domain="action",
        )
        for el in root.iter("action")
    ]


def parse_module(text: str, source: str = "") -> list[Step]:
    """取出 <activity> 與 <validation>，兩者交錯時仍維持文件順序"""
    root = _load(text, source)
    steps = []
    for el in root.iter():
        if el.tag not in ("activity", "validation"):
            continue
        attrs = dict(el.attrib)
        kind = _kind(el)
        if kind == "executescript" and "script" not in attrs and (el.text or "").strip():
            # 程式碼可能寫在元素內文
            attrs["script"] = el.text.strip()
        if el.tag == "validation" and "elementid" in attrs:
            attrs.setdefault("elementId", attrs.pop("elementid"))
        steps.append(Step(kind=kind, attributes=attrs, domain=el.tag))
    return steps
