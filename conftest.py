import json
import shutil
from pathlib import Path

import allure
import pytest
from playwright.sync_api import sync_playwright

from config.settings import HEADLESS, LOG_LEVEL
from pages.store_page import StorePage
from utils.logger import build_logger

ARTIFACT_DIRS = ["artifacts", "videos", "tracing"]


def _attempt_dir(node) -> str:
    # execution_count 由 pytest-rerunfailures 写入，第一次执行时不存在
    return f"attempt_{getattr(node, 'execution_count', 1)}"


def _artifact_dir(node) -> Path:
    module = node.module.__name__.split(".")[-1]
    cls = node.cls.__name__ if node.cls else "no_class"
    return Path("artifacts") / module / cls / node.name / _attempt_dir(node)


# ================== Session Fixtures ==================
@pytest.fixture(scope="session")
def playwright_instance():
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance):
    """浏览器只启动一次"""
    browser = playwright_instance.chromium.launch(headless=HEADLESS)
    yield browser
    browser.close()


@pytest.fixture(scope="session")
def clean_artifacts():
    """第一个UI用例启动前，清空artifacts、videos、tracing"""
    for path in ARTIFACT_DIRS:
        p = Path(path)
        if p.exists():
            shutil.rmtree(p)
        p.mkdir()


# ================== Function Fixtures ==================
@pytest.fixture(scope="function")
def context(browser, clean_artifacts, request):
    """
    每个测试方法一个全新 context
    - 视频 + tracing 每个 attempt 单独目录
    - 成功用例删除，失败用例移动到 artifacts 并附加到 allure
    """
    attempt_dir = _attempt_dir(request.node)
    record_video_dir = Path("videos") / attempt_dir
    record_tracing_dir = Path("tracing") / attempt_dir
    record_video_dir.mkdir(parents=True, exist_ok=True)
    record_tracing_dir.mkdir(parents=True, exist_ok=True)

    context = browser.new_context(
        record_video_dir=str(record_video_dir),
        record_video_size={"width": 1280, "height": 720},
        viewport={"width": 1280, "height": 720})
    context.tracing.start(name=attempt_dir, screenshots=True, snapshots=True, sources=True)

    yield context

    #  ======== teardown：video、trace 在 context.close() 后才真正落盘 ========
    trace_path = record_tracing_dir / "trace.zip"
    try:
        context.tracing.stop(path=trace_path)
    finally:
        context.close()

    if not getattr(request.node, "_failed", False):
        shutil.rmtree(record_video_dir, ignore_errors=True)
        shutil.rmtree(record_tracing_dir, ignore_errors=True)
        return

    target_dir = _artifact_dir(request.node)
    target_dir.mkdir(parents=True, exist_ok=True)

    for video_file in record_video_dir.glob("*.webm"):
        shutil.move(str(video_file), target_dir / video_file.name)
    if trace_path.exists():
        shutil.move(str(trace_path), target_dir / "trace.zip")

    for video in target_dir.glob("*.webm"):
        allure.attach.file(video, name="Video", attachment_type=allure.attachment_type.WEBM)
    trace = target_dir / "trace.zip"
    if trace.exists():
        allure.attach.file(trace, name="Playwright-Trace.zip")


@pytest.fixture(scope="function")
def page(context):
    """每个测试方法一个新 page"""
    page = context.new_page()
    console_errors = []

    # 浏览器级别监听，页面跳转不会丢失
    page.on(
        "console",
        lambda msg: console_errors.append({
            "type": msg.type,
            "text": msg.text,
            "location": str(msg.location)
        }) if msg.type == "error" else None
    )
    page._console_errors = console_errors  # 挂到page上，方便hook里取
    yield page
    page.close()


@pytest.fixture(scope="function")
def scenario_logger(request):
    """每个用例一个 logger，级别在这里显式配置"""
    return build_logger(f"scenario.{request.node.name}", LOG_LEVEL)


@pytest.fixture(scope="function")
def store_page(page, scenario_logger):
    return StorePage(page, scenario_logger)


# ================== Pytest Hook：失败处理 ==================
@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    测试失败时自动保存：
    - 截图
    - URL
    - Console errors
    """
    outcome = yield
    rep = outcome.get_result()

    # 只处理 call 阶段失败
    if rep.when != "call" or not rep.failed:
        return

    page = item.funcargs.get("page")
    if not page:
        return

    # 标记失败，context teardown 据此保留 video、trace
    item._failed = True

    base_dir = _artifact_dir(item)
    base_dir.mkdir(parents=True, exist_ok=True)

    screenshot = base_dir / "failure.png"
    page.screenshot(path=screenshot, full_page=True)
    (base_dir / "url.txt").write_text(page.url, encoding="utf-8")
    console = base_dir / "console_errors.json"
    console.write_text(
        json.dumps(getattr(page, "_console_errors", []), indent=2, ensure_ascii=False), encoding="utf-8")

    allure.attach.file(screenshot, name="Failure-Screenshot", attachment_type=allure.attachment_type.PNG)
    allure.attach(page.url, name="Page-Url", attachment_type=allure.attachment_type.TEXT)
    allure.attach.file(console, name="Console-Errors", attachment_type=allure.attachment_type.JSON)
