def build_retry_insight(attempts: list[dict]) -> list[str]:
    """根据所有 attempt 的执行记录生成 Retry Insight 文本"""
    lines = []

    failed = [a for a in attempts if a["status"] == "FAILED"]
    passed = [a for a in attempts if a["status"] == "PASSED"]

    if failed and passed:
        lines += [f"• Failed {len(failed)} times, then passed on retry", "• Likely flaky test (unstable behavior)"]
    elif attempts and len(failed) == len(attempts):
        lines.append(f"• All {len(attempts)} attempts failed")

    errors = {a["error"] for a in failed if a["error"]}
    if len(errors) == 1:
        lines.append("• Same error across failed attempts")
    elif len(errors) > 1:
        lines.append("• Error message changed between attempts")

    urls = {a["url"] for a in failed if a.get("url")}
    if len(urls) > 1:
        lines.append("• Failed at different URLs")
    return lines
