"""
Action / Activity / Validation Translator

把單一 Ranorex 步驟翻成一行 Xamarin.UITest 程式碼。
三個入口共用同一模式：以小寫 kind 查表 → 呼叫對應的轉換函式；
查不到（或該 kind 沒有等價 API）時 code 為 None，
輸出端改寫入人工轉換標記，整個檔案的轉換不會因此失敗。

每一行都保留原始步驟的註解，方便人工逐行比對來源。
"""

import re
from typing import Callable, Mapping

from converter.locator import cs_string, locator_for_id
from converter.schema import TranslationLine

DEFAULT_WAIT_TIMEOUT_MS = 5000

_DIGITS = re.compile(r"[0-9]+")

# (attrs, locator) → code
ActionHandler = Callable[[Mapping[str, str], str], "str | None"]
# attrs → code
ActivityHandler = Callable[[Mapping[str, str]], "str | None"]
# (compare_value, selector) → code
ValidationHandler = Callable[[str, str], str]


def _get(attrs: Mapping[str, str], key: str) -> str:
    return attrs.get(key) or ""


def _one_line(value: str) -> str:
    return value.replace("\r", "").replace("\n", "\\n")


def _format_attrs(attrs: Mapping[str, str]) -> str:
    return " ".join(f'{k}="{_one_line(v)}"' for k, v in attrs.items() if k != "type")


def _source_kind(kind: str, attrs: Mapping[str, str]) -> str:
    """來源檔上的原始 type（保留大小寫）"""
    return _one_line(attrs.get("type") or kind)


def _comment(domain: str, kind: str, attrs: Mapping[str, str]) -> str:
    detail = _format_attrs(attrs)
    head = f'// Ranorex {domain}: type="{_source_kind(kind, attrs)}"'
    return f"{head} {detail}" if detail else head


def _no_equivalent(*_args) -> None:
    return None


# ── 錄製動作 ──

def _keyboard(attrs: Mapping[str, str], _locator: str) -> str:
    value = _get(attrs, "value")
    if "Return" in value:
        return "app.PressEnter();"
    if "Tab" in value:
        return "app.DismissKeyboard();"
    return f"app.EnterText({cs_string(value)});"


ACTION_TABLE: dict[str, ActionHandler] = {
    "click": lambda attrs, loc: f"app.Tap({loc});",
    "touch": lambda attrs, loc: f"app.Tap({loc});",
    "setvalue": lambda attrs, loc: f"app.EnterText({loc}, {cs_string(_get(attrs, 'value'))});",
    "movemouse": _no_equivalent,           # Xamarin.UITest 沒有滑鼠移動
    "keyboard": _keyboard,
    "wait": lambda attrs, loc: f"app.WaitForElement({loc});",
    "validate": lambda attrs, loc: f"Assert.That(app.Query({loc}).Any(), Is.True);",
}


def translate_action(kind: str, attrs: Mapping[str, str], locator: str) -> TranslationLine:
    """翻譯一個錄製動作 (.rxrec 的 <action>)"""
    handler = ACTION_TABLE.get(kind.lower())
    code = handler(attrs, locator) if handler else None
    return TranslationLine(_comment("action", kind, attrs), code)


# ── 測試模組 activity ──

def _target(attrs: Mapping[str, str]) -> str:
    return locator_for_id(_get(attrs, "target"))


def _wait_activity(attrs: Mapping[str, str]) -> str:
    selector = _target(attrs)
    raw = _get(attrs, "timeout").strip()
    if not raw:
        timeout = str(DEFAULT_WAIT_TIMEOUT_MS)
    elif _DIGITS.fullmatch(raw):
        timeout = raw
    else:
        return f"app.WaitForElement({selector});"
    return (f"app.WaitForElement({selector}, "
            f"timeout: TimeSpan.FromMilliseconds({timeout}));")


ACTIVITY_TABLE: dict[str, ActivityHandler] = {
    "click": lambda attrs: f"app.Tap({_target(attrs)});",
    "touch": lambda attrs: f"app.Tap({_target(attrs)});",
    "setvalue": lambda attrs: f"app.EnterText({_target(attrs)}, {cs_string(_get(attrs, 'value'))});",
    "wait": _wait_activity,
    "executescript": _no_equivalent,
    "invoke": _no_equivalent,
}

# 一律需人工轉換的 activity → 要完整保留的屬性
_CODE_ACTIVITIES = {
    "executescript": "script",
    "invoke": "method",
}


def _code_activity_comment(kind: str, attrs: Mapping[str, str]) -> str:
    key = _CODE_ACTIVITIES[kind.lower()]
    lines = [f'// Ranorex activity: type="{_source_kind(kind, attrs)}"']
    body = _get(attrs, key).splitlines() or [""]
    lines.append(f"//   {key}: {body[0]}")
    lines.extend(f"//     {line}" for line in body[1:])
    for k, v in attrs.items():
        if k not in ("type", key):
            lines.append(f'//   {k}="{_one_line(v)}"')
    return "\n".join(lines)


def translate_activity(kind: str, attrs: Mapping[str, str]) -> TranslationLine:
    """翻譯一個測試模組 activity，元素 query 由 attrs["target"] 產生"""
    if kind.lower() in _CODE_ACTIVITIES:
        return TranslationLine(_code_activity_comment(kind, attrs), None)
    handler = ACTIVITY_TABLE.get(kind.lower())
    code = handler(attrs) if handler else None
    return TranslationLine(_comment("activity", kind, attrs), code)


# ── Validation ──

VALIDATION_TABLE: dict[str, ValidationHandler] = {
    "exists": lambda cmp, sel: f"Assert.That(app.Query({sel}).Any(), Is.True);",
    "notexists": lambda cmp, sel: f"Assert.That(app.Query({sel}).Any(), Is.False);",
    "equals": lambda cmp, sel: f"Assert.That(app.Query({sel}).First().Text, Is.EqualTo({cs_string(cmp)}));",
    "contains": lambda cmp, sel: f"Assert.That(app.Query({sel}).First().Text, Does.Contain({cs_string(cmp)}));",
    "enabled": lambda cmp, sel: f"Assert.That(app.Query({sel}).First().Enabled, Is.True);",
    "disabled": lambda cmp, sel: f"Assert.That(app.Query({sel}).First().Enabled, Is.False);",
}


def translate_validation(kind: str, compare_value: str, element_id: str) -> TranslationLine:
    """翻譯一個 validation 規則"""
    compare_value = compare_value or ""
    element_id = element_id or ""
    comment = (f'// Ranorex validation: type="{_one_line(kind)}" '
               f'compare="{_one_line(compare_value)}" elementId="{_one_line(element_id)}"')
    handler = VALIDATION_TABLE.get(kind.lower())
    code = handler(compare_value, locator_for_id(element_id)) if handler else None
    return TranslationLine(comment, code)
