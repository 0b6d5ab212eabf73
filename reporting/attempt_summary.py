from html import escape
from pathlib import Path

from reporting.attempt_diff import calculate_attempt_diff
from reporting.failure_panel import render_failure_panel
from reporting.retry_insight import build_retry_insight
from reporting.utils.template_loader import render


def _mark(flag) -> str:
    return "✔️" if flag else "❌"


def render_attempt_card(a: dict, active: str) -> str:
    failed = a["status"] == "FAILED"
    panel = render_failure_panel(Path(a["base_dir"]), a["attempt"]) if failed and a.get("base_dir") else ""
    return render("attempt_card.html",
                  aid=a["attempt"],
                  active=active,
                  status="❌ FAILED" if failed else "✅ PASSED",
                  duration=a["duration"],
                  error=escape(a["error"] or "-"),
                  url=escape(a.get("url") or "-"),
                  screenshot=_mark(a.get("has_screenshot")),
                  video=_mark(a.get("has_video")),
                  trace=_mark(a.get("has_trace")),
                  failure_panel_html=panel)


def build_attempt_summary(attempts: list[dict]) -> str:
    """所有 attempts 汇总成一个 HTML：Retry Insight + Attempt Diff + 每次 attempt 的卡片"""
    insight = "".join(f"<li>{line}</li>" for line in build_retry_insight(attempts))

    chain = " → ".join(
        f"<span class='attempt-status {a['status'].lower()}'>Attempt {a['attempt']} "
        f"{'❌' if a['status'] == 'FAILED' else '✔'}</span>"
        for a in attempts)

    tabs = ""
    cards = ""
    for i, a in enumerate(attempts):
        active = "active" if i == len(attempts) - 1 else ""
        tabs += (f'<button type="button" id="tab-{a["attempt"]}" class="tab {active}" '
                 f'onclick="show({a["attempt"]});return false;">Attempt {a["attempt"]}</button>')
        cards += render_attempt_card(a, active)

    # 页面打开时默认展示最后一次失败的 attempt
    last_failed = max((a["attempt"] for a in attempts if a["status"] == "FAILED"),
                      default=attempts[-1]["attempt"])

    return render("attempt_summary.html",
                  retry_insight=f"<ul>{insight}</ul>" if insight else "",
                  attempt_diff=calculate_attempt_diff(attempts),
                  chain=chain,
                  tabs=tabs,
                  cards=cards,
                  last_failed=last_failed)
