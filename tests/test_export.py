"""Tests for the JSON artifact, spreadsheet export and snapshot storage."""

from __future__ import annotations

import json

from openpyxl import load_workbook

from report_export import (
    convert_json_to_xlsx, generate_json_report, read_content_from_file,
    save_content_to_file, save_json_to_file, xlsx_filename_for_url,
)
from report_scanner import SEPARATOR_FINDING, Finding

FINDINGS = [
    Finding("Włączony Gravatar", "wymaga uwagi"),
    Finding("Kompresja", "wszystko ok"),
    SEPARATOR_FINDING,
]


def test_json_report_rows():
    assert generate_json_report(FINDINGS) == [
        {"name": "Włączony Gravatar", "note": "wymaga uwagi"},
        {"name": "Kompresja", "note": "wszystko ok"},
        {"name": "--", "note": "--"},
    ]


def test_json_file_keeps_polish_text(tmp_path):
    path = save_json_to_file(FINDINGS, "finalResult.json", str(tmp_path))
    raw = (tmp_path / "finalResult.json").read_text(encoding="utf-8")
    assert "Włączony Gravatar" in raw
    assert json.loads(raw)[2] == {"name": "--", "note": "--"}
    assert path == str(tmp_path / "finalResult.json")


def test_xlsx_filename_for_url():
    assert xlsx_filename_for_url("https://ambiscale.com") == "ambiscale.com.xlsx"
    assert xlsx_filename_for_url("http://example.com/blog/post") == "example.com_blog_post.xlsx"
    assert xlsx_filename_for_url("https://example.com:8080/") == "example.com_8080_.xlsx"


def test_xlsx_has_single_report_sheet(tmp_path):
    json_path = save_json_to_file(FINDINGS, "finalResult.json", str(tmp_path))
    reports_dir = tmp_path / "reports"
    xlsx_path = convert_json_to_xlsx(json_path, str(reports_dir), url_to_test="https://example.com/shop")

    assert xlsx_path == str(reports_dir / "example.com_shop.xlsx")
    wb = load_workbook(xlsx_path)
    assert wb.sheetnames == ["Report"]
    rows = list(wb["Report"].iter_rows(values_only=True))
    assert rows == [
        ("name", "note"),
        ("Włączony Gravatar", "wymaga uwagi"),
        ("Kompresja", "wszystko ok"),
        ("--", "--"),
    ]


def test_xlsx_name_override(tmp_path):
    json_path = save_json_to_file(FINDINGS, "finalResult.json", str(tmp_path))
    xlsx_path = convert_json_to_xlsx(json_path, str(tmp_path / "reports"), "data_file.xlsx",
                                     url_to_test="https://example.com")
    assert xlsx_path.endswith("data_file.xlsx")


def test_snapshot_roundtrip(tmp_path):
    path = save_content_to_file("<html>zażółć</html>", "data.html", str(tmp_path / "out"))
    assert read_content_from_file(path) == "<html>zażółć</html>"


def test_snapshot_with_invalid_utf8_is_replaced(tmp_path):
    path = tmp_path / "data.html"
    path.write_bytes(b"<p>Caf\xe9</p>")
    assert read_content_from_file(str(path)) == "<p>Caf�</p>"
