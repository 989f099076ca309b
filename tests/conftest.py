"""Shared fixtures and HTML builders for report scanner tests."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from report_config import ReportConfig


def table_row(name: str, cell_class: str = "") -> str:
    cls = f' class="{cell_class}"' if cell_class else ""
    return f"<tr><td>{name}</td><td{cls}>value</td></tr>"


def table(*rows: str) -> str:
    return f"<table><thead><tr><th>Name</th><th>Value</th></tr></thead><tbody>{''.join(rows)}</tbody></table>"


def section(section_id: str, body: str) -> str:
    return f'<div id="{section_id}">{body}</div>'


def badge(label: str, sibling: str) -> str:
    return f'<p><span class="badge">{label}</span>{sibling}</p>'


def document(*sections: str) -> str:
    return f"<html><head><title>Report</title></head><body>{''.join(sections)}</body></html>"


def soup_section(html: str, section_id: str):
    return BeautifulSoup(html, "lxml").select_one(f"#{section_id}")


@pytest.fixture
def config(tmp_path) -> ReportConfig:
    return ReportConfig(
        target_url="https://inspectwp.com/en",
        url_to_test="https://example.com",
        current_wp_version="6.6.1",
        output_dir=str(tmp_path),
        navigation_timeout=1000,
    )


@pytest.fixture
def full_report_html() -> str:
    """A report with every section present, rendered out of report order."""
    return document(
        section("sectionTools", "<h5> Google Tag Manager </h5><h5>Yoast SEO</h5>"),
        section("sectionWordpress", table(
            table_row("WordPress Emoji Script", "bg-danger"),
            table_row("Gravatar", "bg-warning"),
        ) + badge("WordPress version", '<span class="text-danger">6.6.1</span>')),
        section("sectionSecurity", table(table_row("X-Frame-Options-Header", "bg-danger"))),
        section("sectionGdpr", table(table_row("Is Google Maps loaded without consent?", "bg-warning"))),
        section("sectionSeo", table(table_row("Robots", "bg-danger"))),
        section("sectionHtml",
                badge("Doctype", '<span class="text-success">html</span>')
                + badge("Favicon", '<span><img src="/favicon.ico"></span>')),
        section("sectionContent", '<div class="heading-hierarchy-row"><span class="bg-warning">h3</span></div>'),
        section("sectionPerformance", table(table_row("Compression", "bg-success"))),
    )
