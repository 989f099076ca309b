"""
InspectWP Report Exporter - CLI Runner

Usage:
    python run_report.py fetch [--url https://example.com] [--output name.xlsx]
    python run_report.py load <report.html> [--output name.xlsx]

"fetch" submits the URL to inspectwp.com and exports the rendered report;
"load" re-exports a report snapshot saved by an earlier run.
"""

import argparse
import os
import sys
import time

from dotenv import load_dotenv
load_dotenv()

from report_config import load_config
from report_scanner import analyze_file
from report_fetcher import InspectWPFetcher, FetchError, LimitReachedError
from report_export import save_content_to_file, save_json_to_file, convert_json_to_xlsx

HTML_SNAPSHOT_FILE = "data.html"
JSON_RESULT_FILE = "finalResult.json"
LOAD_MODE_XLSX_FILE = "data_file.xlsx"
LIMIT_REACHED_MESSAGE = "Wykorzystano dzienny limit raportów na https://inspectwp.com"


def run_fetch(config, xlsx_file_name: str = None) -> str:
    """Fetch the live report, analyze it and export it. Returns the XLSX path."""
    print(f"[1/3] Fetching report for {config.url_to_test} from {config.target_url}...")
    html = InspectWPFetcher(config).fetch(config.url_to_test)
    html_path = save_content_to_file(html, HTML_SNAPSHOT_FILE, config.output_dir)
    print()

    print("[2/3] Analyzing report sections...")
    findings = analyze_file(html_path, config)
    print()

    print("[3/3] Exporting results...")
    json_path = save_json_to_file(findings, JSON_RESULT_FILE, config.output_dir)
    return convert_json_to_xlsx(json_path, config.reports_dir, xlsx_file_name, url_to_test=config.url_to_test)


def run_load(config, input_file_path: str, xlsx_file_name: str = None) -> str:
    """Analyze a stored report snapshot and export it. Returns the XLSX path."""
    print(f"[1/2] Analyzing {input_file_path}...")
    findings = analyze_file(input_file_path, config)
    print()

    print("[2/2] Exporting results...")
    json_path = save_json_to_file(findings, JSON_RESULT_FILE, config.output_dir)
    return convert_json_to_xlsx(json_path, config.reports_dir, xlsx_file_name or LOAD_MODE_XLSX_FILE,
                                url_to_test=config.url_to_test)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="InspectWP Report Exporter")
    parser.add_argument("mode", nargs="?", default="fetch", choices=["fetch", "load"],
                        help='"fetch" a fresh report or "load" a saved HTML file (default: fetch)')
    parser.add_argument("input_file", nargs="?",
                        help="Path to the saved report HTML (load mode only)")
    parser.add_argument("--url", help="Website to audit (default: INSPECTWP_URL_TO_TEST)")
    parser.add_argument("--output", help="XLSX file name override")
    parser.add_argument("--output-dir", help="Directory for data.html, finalResult.json and reports/")

    args = parser.parse_args(argv)
    try:
        config = load_config().with_overrides(url_to_test=args.url, output_dir=args.output_dir)
    except RuntimeError as e:
        print(f"  [ERROR] {e}")
        return 1

    print("=" * 70)
    print("  INSPECTWP REPORT EXPORTER")
    print(f"  Mode: {args.mode}")
    print(f"  Site: {config.url_to_test}")
    print("=" * 70)
    print()

    start_time = time.time()
    if args.mode == "load":
        if not args.input_file:
            print("  [ERROR] Please provide a path to the HTML file.")
            return 1
        if not os.path.isfile(args.input_file):
            print(f"  [ERROR] File not found: {args.input_file}")
            return 1
        try:
            xlsx_path = run_load(config, args.input_file, args.output)
        except OSError as e:
            print(f"  [ERROR] Could not read {args.input_file}: {e}")
            return 1
    else:
        try:
            xlsx_path = run_fetch(config, args.output)
        except LimitReachedError:
            print(f"  [LIMIT] {LIMIT_REACHED_MESSAGE}")
            return 1
        except FetchError as e:
            print(f"  [ERROR] {e}")
            return 1
    elapsed = time.time() - start_time

    print()
    print("=" * 70)
    print(f"  EXPORT COMPLETE in {elapsed:.1f}s")
    print(f"  Report: {xlsx_path}")
    print("=" * 70)
    return 0


if __name__ == "__main__":
    sys.exit(main())
