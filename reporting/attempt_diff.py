from html import escape

from reporting.utils.template_loader import render

ATTACHMENT_FIELDS = ("has_screenshot", "has_video", "has_trace")


def compare_field(attempts: list[dict], field: str) -> str:
    """ 比较同一字段在不同 attempts 中的差异
    :param attempts: 所有 attempts 记录
    :param field: 需要比较的字段（例如 error, url, duration）
    :return: 差异文本（按 attempt 顺序去重），没有差异则返回空字符串 """
    values = list(dict.fromkeys(a.get(field) for a in attempts))
    return "\n".join(map(str, values)) if len(values) > 1 else ""


def compare_attachments(attempts: list[dict]) -> str:
    """比较截图、视频、trace 在不同 attempts 中是否都生成"""
    diff = []
    for field in ATTACHMENT_FIELDS:
        values = list(dict.fromkeys(a.get(field) for a in attempts))
        if len(values) > 1:
            diff.append(f"{field} difference: {', '.join(map(str, values))}")
    return ", ".join(diff)


def calculate_attempt_diff(attempts: list[dict]) -> str:
    sections = [
        ("🛑 Error Differences", compare_field(attempts, "error")),
        ("🌍 URL Differences", compare_field(attempts, "url")),
        ("🕣 Duration Differences", compare_field(attempts, "duration")),
        ("📎 Attachment Differences", compare_attachments(attempts)),
    ]
    return "".join(render("attempt_diff.html", summary=summary, content=escape(content))
                   for summary, content in sections if content)
