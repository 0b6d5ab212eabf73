import json
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import expect, sync_playwright

from config.pages import BASE_URL, URL_PATTERNS
from config.settings import (ACTION_TIMEOUT, ARTIFACT_DIRS, BROWSER, HEADLESS, NAVIGATION_TIMEOUT, RUN_UI,
                             VIEWPORT)
from data.login_data import USERS
from pages.login_page import LoginPage
from reporting.attempt_summary import build_attempt_summary


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    if not RUN_UI:
        pytest.skip("RUN_UI 未开启，跳过真实浏览器用例")
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """每个 worker 浏览器只启动一次"""
    print(f"🚀 启动浏览器 {BROWSER} (headless={HEADLESS}) -> {BASE_URL}")
    browser = getattr(playwright_instance, BROWSER).launch(headless=HEADLESS)
    expect.set_options(timeout=ACTION_TIMEOUT)
    yield browser
    browser.close()


def pytest_sessionstart(session):
    """测试session启动前，清空 artifacts、videos、tracing；xdist 下只在主进程执行"""
    if not RUN_UI or hasattr(session.config, "workerinput"):
        return
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, request):
    """
    每个测试方法（每次 attempt）一个全新 context，互不共享 cookie/localStorage
    - 视频 + tracing 每个 attempt 单独目录
    - 失败时转存到 artifacts 并挂到 allure，成功时删除
    """
    attempt = getattr(request.node, "execution_count", 1)
    request.node._current_attempt = attempt
    request.node._page = None

    attempt_dir = f"attempt_{attempt}"
    record_video_dir = Path("videos") / request.node.name / attempt_dir
    record_tracing_dir = Path("tracing") / request.node.name / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    context = browser.new_context(
        base_url=BASE_URL,
        viewport=VIEWPORT,
        record_video_dir=str(record_video_dir),
        record_video_size=VIEWPORT)
    context.set_default_timeout(ACTION_TIMEOUT)
    context.set_default_navigation_timeout(NAVIGATION_TIMEOUT)
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    # video 只有在 context.close() 后才真正落盘，trace.zip 在 stop 时生成
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)
    finally:
        context.close()

    current = _current_attempt_record(request.node)
    if current is None or current["status"] == "PASSED":
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
    else:
        _collect_failure_artifacts(current, record_video_dir, trace_path)

    # 最后一次 attempt，或重跑后通过时，挂 Attempt Summary
    attempts = getattr(request.node, "_attempts", [])
    # 未传 --reruns 时 option.reruns 为 None
    max_attempts = (getattr(request.config.option, "reruns", None) or 0) + 1
    has_failure = any(a["status"] == "FAILED" for a in attempts)
    if has_failure and current is not None and (attempt == max_attempts or current["status"] == "PASSED"):
        allure.attach(build_attempt_summary(attempts), name="Attempt Summary",
                      attachment_type=allure.attachment_type.HTML)


@pytest.fixture(scope="function")
def page(context, request):
    """每个测试方法一个新 page，收集 console error 供失败时保存"""
    page = context.new_page()
    request.node._page = page  # setup 阶段失败时 funcargs 中还没有 page
    console_errors = []
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors
    yield page
    page.close()


@pytest.fixture(scope="function")
def logged_in_page(page):
    """以 standard_user 登录并停留在 inventory 页"""
    login_page = LoginPage(page)
    login_page.open_login()
    login_page.login(USERS["standard"].username, USERS["standard"].password)
    login_page.base.wait_for_url(URL_PATTERNS["inventory"])
    return page


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    call 阶段结束后记录本次 attempt，setup 阶段（如登录 fixture）失败也记录；失败时立即保存：
    - 截图
    - URL
    - Console errors
    video、trace 要等 context teardown 才生成，在 context fixture 中处理
    """
    outcome = yield
    rep = outcome.get_result()

    if not (rep.when == "call" or (rep.when == "setup" and rep.failed)):
        return
    page = getattr(item, "_page", None)
    if page is None:
        return

    attempt = getattr(item, "execution_count", 1)
    base_dir = _artifact_dir(item, attempt)
    record = {
        "attempt": attempt,
        "status": "FAILED" if rep.failed else "PASSED",
        "duration": round(rep.duration, 2),
        "error": str(rep.longrepr) if rep.failed else "",
        "url": page.url,
        "has_screenshot": False,
        "has_video": False,
        "has_trace": False,
        "base_dir": str(base_dir),
    }
    if not hasattr(item, "_attempts"):
        item._attempts = []
    item._attempts.append(record)

    if not rep.failed:
        return

    base_dir.mkdir(parents=True, exist_ok=True)
    page.screenshot(path=base_dir / "failure.png", full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    (base_dir / "console_errors.json").write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")
    record["has_screenshot"] = True
    allure.attach.file(base_dir / "failure.png", name="Failure-Screenshot",
                       attachment_type=allure.attachment_type.PNG)


def _artifact_dir(item, attempt: int) -> Path:
    module = item.module.__name__.split(".")[-1]
    cls = item.cls.__name__ if item.cls else "no_class"
    return Path("artifacts") / module / cls / item.name / f"attempt_{attempt}"


def _current_attempt_record(node):
    """按 setup 阶段锁定的 attempt 找到对应记录（而不是 attempts[-1]）"""
    attempt = getattr(node, "_current_attempt", 1)
    return next((a for a in getattr(node, "_attempts", []) if a["attempt"] == attempt), None)


def _collect_failure_artifacts(record: dict, record_video_dir: Path, trace_path: Path):
    target_dir = Path(record["base_dir"])
    target_dir.mkdir(parents=True, exist_ok=True)

    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    record["has_video"] = any(target_dir.glob("*.webm"))
    record["has_trace"] = (target_dir / "trace.zip").exists()

    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="📎 Video", attachment_type=allure.attachment_type.WEBM)
    if record["has_trace"]:
        allure.attach.file(target_dir / "trace.zip", name="📎 Playwright-Trace.zip")
