"""
Element Locator Builder
把 Ranorex 元素路徑 (adapter 鏈) 轉成 Xamarin.UITest 的 query lambda。

    [id=LoginButton]                 → x => x.Marked("LoginButton")
    [role=Form, title=Login]         → x => x.Class("Form").Text("Login")
    None / 空路徑                     → x => x.All()
"""

from converter.schema import Adapter, ElementPath

MATCH_ANY = "x => x.All()"

# adapter 屬性 → AppQuery 方法
_CONDITION_MAP = {
    "id": "Marked",
    "title": "Text",
    "role": "Class",
}

# C# 一般字串常值不可含實際換行
_CS_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
})


def cs_string(value: str) -> str:
    """轉成 C# 字串常值（跳脫 \\、"、換行與 tab）"""
    escaped = value.translate(_CS_ESCAPES)
    return f'"{escaped}"'


def build_locator(path: ElementPath | None) -> str:
    """
    產生元素 query。

    每個 adapter 只取一個條件（id > title > role），
    三者皆空的 adapter 直接略過；沒有任何條件時回傳 x => x.All()。
    """
    if path is None:
        return MATCH_ANY

    conditions = []
    for adapter in path.adapters:
        condition = adapter.condition()
        if condition is None:
            continue
        attr, value = condition
        conditions.append(f"{_CONDITION_MAP[attr]}({cs_string(value)})")

    if not conditions:
        return MATCH_ANY
    return "x => x." + ".".join(conditions)


def locator_for_id(element_id: str) -> str:
    """單一 id 的 query（activity target / validation elementId 用）"""
    return build_locator(ElementPath((Adapter(id=element_id),)))
