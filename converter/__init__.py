"""
Ranorex → Xamarin.UITest 轉換器 (Converter)

走訪 Ranorex 專案，把測試套件、錄製檔與 C# 程式碼模組
逐檔轉成 Xamarin.UITest (NUnit) 測試原始碼。

用法:
    python -m converter path/to/ranorex/project --output ~/XamarinTests

輸入 → 輸出：
    Login.rxtst   → <TestCase>Tests.cs   (每個 test case 一個)
    Login.rxrec   → LoginTests.cs
    Helpers.cs    → Helpers.cs           (文字替換)

另外產生一次專案骨架：
    ~/XamarinTests/
    ├── BaseTestFixture.cs
    ├── XamarinTests.csproj
    ├── Pages/
    ├── Tests/
    └── conversion_log.txt

找不到對應 API 的步驟會保留原始註解並加上
`// TODO: No direct Xamarin.UITest equivalent - Needs manual conversion`。
"""
