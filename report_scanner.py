"""
InspectWP Report Scanner
Turns a rendered InspectWP report into a flat list of named findings.
Each report section has its own extraction rule; the section list and the
bilingual field names live in report_rules.py.
"""

from dataclasses import dataclass, asdict
from typing import Optional

from bs4 import BeautifulSoup, Tag

from report_config import ReportConfig
from report_export import read_content_from_file
from report_rules import (
    SEPARATOR,
    STATUS_OK,
    STATUS_NEEDS_ATTENTION,
    STATUS_NEEDS_FIX,
    NOTE_VERSION_HIDDEN,
    STRATEGY_GENERIC_TABLE,
    STRATEGY_HTML_BADGES,
    STRATEGY_CONTENT_HEADING,
    STRATEGY_TOOLS_LISTING,
    Section,
    get_sections,
    split_field_name,
)

# Names that bypass the generic table lookup
WP_VERSION_FIELD = "Aktualna wersja Wordpressa?"
OLD_THEMES_FIELD = "Stare domyślne motywy WordPressa"
DEPRECATED_HTML_FIELD = "Przestarzałe znaczniki HTML"
HEADING_HIERARCHY_FIELD = "Hierarchia nagłówków"

# Badges whose sibling is checked for an <img> instead of a status class
IMAGE_BADGE_LABELS = ("Favicon", "Apple Touch Icon URL")


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass(frozen=True)
class Finding:
    name: str
    note: str  # one of the STATUS_* values, NOTE_VERSION_HIDDEN or a tool name

    def to_dict(self) -> dict:
        return asdict(self)


SEPARATOR_FINDING = Finding(name=SEPARATOR, note=SEPARATOR)


# =============================================================================
# STATUS RESOLVER
# =============================================================================

def _has_class(tag: Optional[Tag], class_name: str) -> bool:
    if tag is None:
        return False
    return class_name in (tag.get("class") or [])


def _closest(tag: Tag, class_name: str) -> Optional[Tag]:
    """Nearest element (the tag itself included) carrying class_name."""
    node = tag
    while node is not None:
        if _has_class(node, class_name):
            return node
        node = node.parent
    return None


def resolve_status(element: Optional[Tag]) -> str:
    """Map a badge sibling's text-danger / text-warning class to a status."""
    if _has_class(element, "text-danger"):
        return STATUS_NEEDS_FIX
    if _has_class(element, "text-warning"):
        return STATUS_NEEDS_ATTENTION
    return STATUS_OK


def resolve_cell_status(cell: Optional[Tag]) -> Optional[str]:
    """Map a table cell's bg-* class to a status, or None if it carries none."""
    if _has_class(cell, "bg-danger"):
        return STATUS_NEEDS_FIX
    if _has_class(cell, "bg-success"):
        return STATUS_OK
    if _has_class(cell, "bg-warning"):
        return STATUS_NEEDS_ATTENTION
    return None


def resolve_worst_status(container: Optional[Tag]) -> str:
    """Worst bg-* status found anywhere below container (danger wins)."""
    if container is None:
        return STATUS_OK
    if container.select_one(".bg-danger"):
        return STATUS_NEEDS_FIX
    if container.select_one(".bg-warning"):
        return STATUS_NEEDS_ATTENTION
    return STATUS_OK


def _find_by_text(section: Tag, selector: str, text: str) -> Optional[Tag]:
    for el in section.select(selector):
        if text in el.get_text():
            return el
    return None


# =============================================================================
# GENERIC TABLE SECTIONS
# =============================================================================

def _body_rows(table: Tag) -> list[Tag]:
    """Body rows of a table, including rows of a table written without <tbody>."""
    if table.find("tbody", recursive=False) is not None:
        return table.select("tbody tr")
    return [tr for tr in table.select("tr") if tr.find_parent(["thead", "tfoot"]) is None]


def collect_table_rows(section: Tag) -> list[tuple[str, Optional[str]]]:
    """Return (raw name, status or None) for every table body row in a section."""
    rows = []
    for table in section.select("table"):
        for row in _body_rows(table):
            cells = row.select("td")
            name = cells[0].get_text().strip() if cells else ""
            status = resolve_cell_status(cells[1]) if len(cells) > 1 else None
            rows.append((name, status))
    return rows


def check_wordpress_version(section: Tag, pl_name: str, current_version: str) -> Finding:
    """Compare the reported WordPress version with the current release.

    InspectWP only prints the version in red when it is exposed; anything else
    means the version could not be read.
    """
    badge = _find_by_text(section, ".badge", "WordPress version")
    if badge is not None:
        value = badge.find_next_sibling()
        if _has_class(value, "text-danger"):
            note = STATUS_OK if value.get_text().strip() == current_version else STATUS_NEEDS_FIX
            return Finding(pl_name, note)
    return Finding(pl_name, NOTE_VERSION_HIDDEN)


def check_old_default_themes(section: Tag, pl_name: str) -> Finding:
    heading = _find_by_text(section, "h3", "WordPress default themes")
    if heading is None:
        return Finding(pl_name, STATUS_OK)
    row = _closest(heading, "row")
    table = row.select_one("table") if row is not None else None
    return Finding(pl_name, resolve_worst_status(table))


def extract_generic_table(section: Tag, rule: Section, config: ReportConfig) -> list[Finding]:
    """Look up every mapped field among the section's table rows.

    Output follows the mapping order; a field with no matching row is reported OK.
    """
    rows = collect_table_rows(section)
    findings = []
    for field_name in rule.fields:
        pl_name, en_name = split_field_name(field_name)

        if pl_name == WP_VERSION_FIELD:
            findings.append(check_wordpress_version(section, pl_name, config.current_wp_version))
            continue
        if pl_name == OLD_THEMES_FIELD:
            findings.append(check_old_default_themes(section, pl_name))
            continue

        status = STATUS_OK
        for raw_name, row_status in rows:
            if raw_name == en_name or raw_name == pl_name:
                status = row_status or STATUS_OK
                break
        findings.append(Finding(pl_name, status))
    return findings


# =============================================================================
# HTML SECTION
# =============================================================================

def check_html_badge(section: Tag, pl_name: str, label: str) -> Optional[Finding]:
    """Status of the first badge mentioning label, or None when there is none."""
    badge = _find_by_text(section, ".badge", label)
    if badge is None:
        return None
    sibling = badge.find_next_sibling()
    if label in IMAGE_BADGE_LABELS:
        has_image = sibling is not None and sibling.find("img") is not None
        return Finding(pl_name, STATUS_OK if has_image else STATUS_NEEDS_FIX)
    return Finding(pl_name, resolve_status(sibling))


def check_deprecated_html_tags(section: Tag) -> str:
    heading = _find_by_text(section, "h3", "Deprecated HTML")
    if heading is None:
        return STATUS_OK
    column = _closest(heading, "col-12")
    label = column.find_next_sibling() if column is not None else None
    if not _has_class(label, "col-12"):
        return STATUS_OK
    return resolve_status(label.find("span"))


def extract_html_badges(section: Tag, rule: Section, config: ReportConfig) -> list[Finding]:
    """Badge-based checks; badges missing from the report are left out entirely."""
    findings = []
    for field_name in rule.fields:
        pl_name, label = split_field_name(field_name)
        if pl_name == DEPRECATED_HTML_FIELD:
            findings.append(Finding(pl_name, check_deprecated_html_tags(section)))
            continue
        finding = check_html_badge(section, pl_name, label)
        if finding is not None:
            findings.append(finding)
    return findings


# =============================================================================
# CONTENT / TOOLS SECTIONS
# =============================================================================

def extract_content_heading(section: Tag, rule: Section, config: ReportConfig) -> list[Finding]:
    note = STATUS_OK
    for row in section.select(".heading-hierarchy-row"):
        if row.select_one(".bg-danger"):
            note = STATUS_NEEDS_FIX
            break
        if row.select_one(".bg-warning"):
            note = STATUS_NEEDS_ATTENTION
    return [Finding(HEADING_HIERARCHY_FIELD, note)]


def extract_tools_listing(section: Tag, rule: Section, config: ReportConfig) -> list[Finding]:
    """Tool names detected on the site, listed as free text."""
    return [Finding(SEPARATOR, h5.get_text().strip()) for h5 in section.select("h5")]


EXTRACTORS = {
    STRATEGY_GENERIC_TABLE: extract_generic_table,
    STRATEGY_HTML_BADGES: extract_html_badges,
    STRATEGY_CONTENT_HEADING: extract_content_heading,
    STRATEGY_TOOLS_LISTING: extract_tools_listing,
}


# =============================================================================
# ORCHESTRATOR
# =============================================================================

def analyze_section(section: Tag, rule: Section, config: ReportConfig) -> list[Finding]:
    return EXTRACTORS[rule.strategy](section, rule, config)


def analyze_document(soup: BeautifulSoup, config: ReportConfig) -> list[Finding]:
    """Run every section extractor in report order.

    Sections missing from the document are skipped; each present section is
    followed by a separator row.
    """
    findings = []
    for rule in get_sections():
        section = soup.select_one(rule.selector)
        if section is None:
            print(f"  [SECTION] {rule.selector} not found")
            continue
        print(f"  [SECTION] Analysis completed for {rule.selector}")
        findings.extend(analyze_section(section, rule, config))
        findings.append(SEPARATOR_FINDING)
    return findings


def analyze_html(html: str, config: ReportConfig) -> list[Finding]:
    return analyze_document(BeautifulSoup(html, "lxml"), config)


def analyze_file(file_path: str, config: ReportConfig) -> list[Finding]:
    """Analyze a report snapshot previously saved to disk."""
    return analyze_html(read_content_from_file(file_path), config)
