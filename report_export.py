"""
InspectWP Report Exporter - output files.
Saves the rendered report snapshot, the JSON findings artifact and the
spreadsheet handed to the client.
"""

import json
import os
import re

from openpyxl import Workbook

SHEET_NAME = "Report"


def save_content_to_file(content: str, filename: str, output_dir: str) -> str:
    """Write the rendered report HTML and return its path."""
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, filename)
    with open(file_path, "w", encoding="utf-8") as f:
        f.write(content)
    print(f"  [EXPORT] Page content saved to {file_path}")
    return file_path


def read_content_from_file(file_path: str) -> str:
    """Read a saved snapshot; undecodable bytes become U+FFFD."""
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def generate_json_report(findings) -> list[dict]:
    """Findings as plain {"name", "note"} rows, in output order."""
    return [f.to_dict() for f in findings]


def save_json_to_file(findings, filename: str, output_dir: str) -> str:
    os.makedirs(output_dir, exist_ok=True)
    file_path = os.path.join(output_dir, filename)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(generate_json_report(findings), f, indent=2, ensure_ascii=False)
    print(f"  [EXPORT] JSON output saved to {file_path}")
    return file_path


def xlsx_filename_for_url(url: str) -> str:
    """ambiscale.com/blog -> ambiscale.com_blog.xlsx"""
    name = re.sub(r"https?://", "", url, count=1)
    name = re.sub(r"[/:]", "_", name)
    return f"{name}.xlsx"


def _sheet_columns(rows: list[dict]) -> list[str]:
    columns = []
    for row in rows:
        for key in row:
            if key not in columns:
                columns.append(key)
    return columns


def convert_json_to_xlsx(json_file_path: str, reports_dir: str, xlsx_file_name: str = None,
                         url_to_test: str = "") -> str:
    """Convert the JSON artifact to a single-sheet workbook under reports_dir.

    The file is named after url_to_test unless xlsx_file_name is given.
    """
    with open(json_file_path, "r", encoding="utf-8") as f:
        rows = json.load(f)

    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_NAME
    columns = _sheet_columns(rows)
    if columns:
        ws.append(columns)
    for row in rows:
        ws.append([row.get(col) for col in columns])

    file_name = xlsx_file_name or xlsx_filename_for_url(url_to_test)
    os.makedirs(reports_dir, exist_ok=True)
    xlsx_file_path = os.path.join(reports_dir, file_name)
    wb.save(xlsx_file_path)
    print(f"  [EXPORT] XLSX output saved to {xlsx_file_path}")
    return xlsx_file_path
