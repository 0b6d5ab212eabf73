import base64
import json
from html import escape
from pathlib import Path

from reporting.utils.template_loader import render


def render_failure_panel(base_dir: Path, attempt: int) -> str:
    """单次失败 attempt 的证据面板：URL、console errors、截图；视频和trace见附件"""
    url_file = base_dir / "url.txt"
    page_url = url_file.read_text(encoding="utf-8") if url_file.exists() else "-"

    console_file = base_dir / "console_errors.json"
    console_errors = json.loads(console_file.read_text(encoding="utf-8")) if console_file.exists() else []

    screenshot = base_dir / "failure.png"
    screenshot_base64 = base64.b64encode(screenshot.read_bytes()).decode("utf-8") if screenshot.exists() else ""

    return render("failure_panel.html",
                  attempt=attempt,
                  page_url=escape(page_url),
                  console_pretty=escape(json.dumps(console_errors, indent=2, ensure_ascii=False)),
                  screenshot_base64=screenshot_base64)
