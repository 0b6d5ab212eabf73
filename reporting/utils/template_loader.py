from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent


def load_template(name: str) -> str:
    path = BASE_DIR / "templates" / name
    return path.read_text(encoding="utf-8")


def render(name: str, **values) -> str:
    """{{key}} 占位符替换"""
    html = load_template(name)
    for key, value in values.items():
        html = html.replace("{{" + key + "}}", str(value))
    return html
