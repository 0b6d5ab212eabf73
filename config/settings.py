import os


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes")


# 浏览器引擎：chromium / firefox / webkit
BROWSER = os.getenv("BROWSER", "chromium")
HEADLESS = not _env_flag("HEADED")

# 单位：毫秒
ACTION_TIMEOUT = int(os.getenv("ACTION_TIMEOUT", "10000"))  # 元素操作 + expect 断言
NAVIGATION_TIMEOUT = int(os.getenv("NAVIGATION_TIMEOUT", "30000"))  # goto / wait_for_url

VIEWPORT = {"width": 1280, "height": 720}

# 真实浏览器用例（@pytest.mark.ui）默认不跑，CI 中 RUN_UI=1 开启
RUN_UI = _env_flag("RUN_UI")

# 失败证据目录，每次session启动前清空
ARTIFACT_DIRS = ["artifacts", "videos", "tracing"]  # allure-results 用 --clean-alluredir 清理
