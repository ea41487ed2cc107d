# navigator/domains/importer/pages.py

from html import escape

from .schemas import ImportOutcome, ImportStatus

_TITLES = {
    ImportStatus.SUCCESS: "✅ Database imported successfully!",
    ImportStatus.NOT_FOUND: "❌ SQL file not found!",
    ImportStatus.READ_ERROR: "❌ Could not read SQL file:",
    ImportStatus.CONNECTION_ERROR: "❌ Could not connect to the database:",
    ImportStatus.EXECUTION_ERROR: "❌ Import failed:",
    ImportStatus.UNSUPPORTED_DIALECT: "❌ Import failed:",
}


def render_import_page(outcome: ImportOutcome) -> str:
    """가져오기 결과를 HTML 상태 페이지로 만듭니다. 모든 출력값은 escape 합니다."""
    color = "green" if outcome.ok else "red"
    steps = "".join(f"{escape(step)}<br>\n" for step in outcome.steps)

    body = [
        steps,
        f"<h2 style='color: {color};'>{escape(_TITLES[outcome.status])}</h2>",
    ]
    if outcome.ok:
        report = outcome.report
        body.append(
            f"<p>{escape(report.script_path)} ({report.script_bytes} bytes, "
            f"{report.elapsed_seconds}s, backend: {escape(report.backend)})</p>"
        )
        body.append("<p>You can now disable the import endpoint (IMPORT_ENDPOINT_ENABLED=false).</p>")
    else:
        body.append(f"<p>{escape(outcome.message)}</p>")

    return (
        "<!DOCTYPE html>\n<html>\n<head><meta charset='utf-8'><title>Database import</title></head>\n"
        "<body>\n" + "\n".join(body) + "\n</body>\n</html>\n"
    )
