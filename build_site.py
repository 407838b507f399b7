#!/usr/bin/env python3
"""
Render the landing page to a static directory.

The output directory receives ``index.html`` and a copy of the
``static/`` assets, ready to upload to any static host.

Usage:
    python build_site.py --output ./dist
    python build_site.py --output ./dist --year 2025
"""

import argparse
import logging
import shutil
import sys
from datetime import MAXYEAR, MINYEAR, datetime
from pathlib import Path

from legal_services_site.app.core.config import load_settings
from legal_services_site.app.core.logging_config import setup_logging
from legal_services_site.app.main import STATIC_DIR
from legal_services_site.app.services.render_service import PageRenderer

logger = logging.getLogger("build_site")


def build(output: Path, now: datetime) -> Path:
    """Write ``index.html`` and the static assets into ``output``."""
    settings = load_settings()
    html = PageRenderer(settings).render(now=now)

    output.mkdir(parents=True, exist_ok=True)
    index_path = output / "index.html"
    index_path.write_text(html, encoding="utf-8")
    shutil.copytree(STATIC_DIR, output / "static", dirs_exist_ok=True)
    logger.info("Wrote %s", index_path)
    return index_path


def copyright_year(value: str) -> int:
    """argparse type for --year: an integer between MINYEAR and MAXYEAR."""
    try:
        year = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid year: {value!r}")
    if not MINYEAR <= year <= MAXYEAR:
        raise argparse.ArgumentTypeError(f"year must be between {MINYEAR} and {MAXYEAR}, got {year}")
    return year


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Render the landing page to static files.")
    ap.add_argument("--output", default="dist", help="Output directory (default: ./dist)")
    ap.add_argument("--year", type=copyright_year, help="Copyright year to print instead of the current one.")
    args = ap.parse_args(argv)

    settings = load_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    now = datetime.now()
    if args.year is not None:
        now = now.replace(year=args.year, month=1, day=1)

    try:
        index_path = build(Path(args.output), now)
    except OSError as exc:
        print(f"[!] Could not write site to {args.output}: {exc}", file=sys.stderr)
        return 1

    print(f"[+] Site written to {index_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
