"""Tests for mapping styled elements to normalized statuses."""

from __future__ import annotations

from bs4 import BeautifulSoup

from report_rules import STATUS_OK, STATUS_NEEDS_ATTENTION, STATUS_NEEDS_FIX
from report_scanner import resolve_status, resolve_cell_status, resolve_worst_status


def _el(html: str):
    return BeautifulSoup(html, "html.parser").find()


def test_text_danger_needs_fix():
    assert resolve_status(_el('<span class="text-danger">x</span>')) == STATUS_NEEDS_FIX


def test_text_warning_needs_attention():
    assert resolve_status(_el('<span class="text-warning">x</span>')) == STATUS_NEEDS_ATTENTION


def test_danger_beats_warning_on_same_element():
    assert resolve_status(_el('<span class="text-warning text-danger">x</span>')) == STATUS_NEEDS_FIX


def test_unstyled_and_missing_elements_are_ok():
    assert resolve_status(_el("<span>x</span>")) == STATUS_OK
    assert resolve_status(None) == STATUS_OK


def test_cell_classes():
    assert resolve_cell_status(_el('<td class="bg-danger">x</td>')) == STATUS_NEEDS_FIX
    assert resolve_cell_status(_el('<td class="bg-warning">x</td>')) == STATUS_NEEDS_ATTENTION
    assert resolve_cell_status(_el('<td class="bg-success">x</td>')) == STATUS_OK


def test_cell_without_status_class_is_unresolved():
    assert resolve_cell_status(_el('<td class="text-center">x</td>')) is None
    assert resolve_cell_status(None) is None


def test_worst_status_prefers_danger():
    container = _el('<div><i class="bg-warning"></i><i class="bg-danger"></i><i class="bg-warning"></i></div>')
    assert resolve_worst_status(container) == STATUS_NEEDS_FIX


def test_worst_status_warning_and_default():
    assert resolve_worst_status(_el('<div><i class="bg-warning"></i></div>')) == STATUS_NEEDS_ATTENTION
    assert resolve_worst_status(_el('<div><i class="bg-success"></i></div>')) == STATUS_OK
    assert resolve_worst_status(None) == STATUS_OK
