from __future__ import annotations

from pathlib import Path
from jinja2 import Environment, PackageLoader, select_autoescape
from ..engine.actions import mask_value
from ..engine.pipeline import ScanResult

def write_report(result: ScanResult, path: Path) -> None:
    env = Environment(
        loader=PackageLoader("indian_docs.reporting", "templates"),
        autoescape=select_autoescape(["html", "j2"])
    )
    # identifiers never reach the report in clear
    env.filters["masked"] = lambda span: mask_value(span.type, span.text)
    tmpl = env.get_template("report.html.j2")
    html = tmpl.render(result=result)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html)
