"""
Configuration for InspectWP Report Exporter.
Values come from the environment (a .env file is loaded by the CLI) and fall
back to the defaults below. The config object is passed explicitly to the
scanner, fetcher and exporter so none of them read process-wide state.
"""

import os
from dataclasses import dataclass, field, replace

DEFAULT_TARGET_URL = "https://inspectwp.com/en"
DEFAULT_URL_TO_TEST = "https://ambiscale.com"
DEFAULT_CURRENT_WP_VERSION = "6.6.1"
DEFAULT_NAV_TIMEOUT_MS = 120000

REPORTS_SUBDIR = "reports"


@dataclass(frozen=True)
class ReportConfig:
    target_url: str = DEFAULT_TARGET_URL
    url_to_test: str = DEFAULT_URL_TO_TEST
    current_wp_version: str = DEFAULT_CURRENT_WP_VERSION
    output_dir: str = field(default_factory=os.getcwd)  # current working directory
    navigation_timeout: int = DEFAULT_NAV_TIMEOUT_MS  # milliseconds

    @property
    def reports_dir(self) -> str:
        return os.path.join(self.output_dir, REPORTS_SUBDIR)

    def with_overrides(self, **changes) -> "ReportConfig":
        """Return a copy with the non-empty overrides applied."""
        return replace(self, **{k: v for k, v in changes.items() if v})


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer number of milliseconds, got {raw!r}")


def load_config() -> ReportConfig:
    """Build a ReportConfig from INSPECTWP_* environment variables."""
    return ReportConfig(
        target_url=os.environ.get("INSPECTWP_TARGET_URL", "").strip() or DEFAULT_TARGET_URL,
        url_to_test=os.environ.get("INSPECTWP_URL_TO_TEST", "").strip() or DEFAULT_URL_TO_TEST,
        current_wp_version=os.environ.get("INSPECTWP_CURRENT_WP_VERSION", "").strip() or DEFAULT_CURRENT_WP_VERSION,
        output_dir=os.environ.get("INSPECTWP_OUTPUT_DIR", "").strip() or os.getcwd(),
        navigation_timeout=_env_int("INSPECTWP_NAV_TIMEOUT_MS", DEFAULT_NAV_TIMEOUT_MS),
    )
