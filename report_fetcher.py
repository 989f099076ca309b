"""
InspectWP Report Fetcher
Drives a headless Chromium (Playwright) through the inspectwp.com checker form
and returns the fully rendered report HTML.

Failures are raised as FetchError / LimitReachedError; the caller decides
whether that ends the run.
"""

import time

from playwright.sync_api import sync_playwright, Error as PlaywrightError

from report_config import ReportConfig
from report_rules import get_section_selectors

URL_INPUT_SELECTOR = "#inspectwp-checker-form-url-input"
RESULTS_SELECTOR = "#sectionWordpress"
LIMIT_REACHED_PATTERN = "/limit-reached"
USER_AGENT = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/126.0 Safari/537.36"
POLL_INTERVAL_MS = 500

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--disable-setuid-sandbox",
]


class FetchError(Exception):
    """The report page could not be loaded or never finished rendering."""


class LimitReachedError(FetchError):
    """inspectwp.com redirected to its daily limit page."""

    def __init__(self, url: str):
        super().__init__(f"Daily report limit reached ({url})")
        self.url = url


def is_limit_reached(url: str) -> bool:
    return LIMIT_REACHED_PATTERN in (url or "")


def wait_for_results(page, timeout_ms: int) -> None:
    """Block until the report renders or inspectwp redirects to its limit page.

    The form submit either renders the results in place or navigates, so the
    page is polled rather than waiting on a single event.
    """
    deadline = time.monotonic() + timeout_ms / 1000
    while True:
        if is_limit_reached(page.url):
            raise LimitReachedError(page.url)
        try:
            if page.query_selector(RESULTS_SELECTOR) is not None:
                return
        except PlaywrightError:
            # Execution context is torn down while the form navigates
            pass
        if time.monotonic() >= deadline:
            raise FetchError(f"Report did not render within {timeout_ms / 1000:.0f}s ({page.url})")
        page.wait_for_timeout(POLL_INTERVAL_MS)


class InspectWPFetcher:
    """Loads an InspectWP report for one audited URL."""

    def __init__(self, config: ReportConfig):
        self.config = config

    def load_page(self, page) -> None:
        page.goto(self.config.target_url, wait_until="networkidle", timeout=self.config.navigation_timeout)
        print(f"  [FETCH] Page loaded: {self.config.target_url}")

    def enter_url_and_submit(self, page, url: str) -> None:
        page.fill(URL_INPUT_SELECTOR, url)
        print(f"  [FETCH] URL entered: {url}")
        page.evaluate("(sel) => document.querySelector(sel).form.submit()", URL_INPUT_SELECTOR)
        print("  [FETCH] Form submitted")
        wait_for_results(page, self.config.navigation_timeout)
        print("  [FETCH] Navigation successful, content loaded")

    def wait_for_sections(self, page) -> None:
        for selector in get_section_selectors():
            page.wait_for_selector(selector, timeout=self.config.navigation_timeout)

    def fetch(self, url_to_test: str = None) -> str:
        """Return the rendered report HTML for url_to_test (defaults to the configured URL)."""
        url = url_to_test or self.config.url_to_test
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True, args=LAUNCH_ARGS)
                try:
                    context = browser.new_context(user_agent=USER_AGENT)
                    page = context.new_page()
                    self.load_page(page)
                    self.enter_url_and_submit(page, url)
                    self.wait_for_sections(page)
                    return page.content()
                finally:
                    browser.close()
        except PlaywrightError as e:
            raise FetchError(f"Browser error while fetching report for {url}: {e}") from e
