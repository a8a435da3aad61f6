"""
Batch Text Analyzer
Runs the live text analyzer over .txt files and writes the metrics as JSON.
"""

import sys
import os
import json
import argparse
import logging
from typing import List, Optional

from tqdm import tqdm

# Add project root to path (go up from scripts/ to root)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, PROJECT_ROOT)

from app.core.logging_config import setup_logging  # noqa: E402
from app.schemas.analysis_models import AnalysisConfig  # noqa: E402
from app.services.analyzer_service import analyze  # noqa: E402

logger = logging.getLogger(__name__)


def collect_files(paths: List[str]) -> List[str]:
    """Expands the given paths into a sorted list of .txt files.

    Args:
        paths (List[str]): Files or directories. Directories are scanned
            (non-recursively) for .txt files.

    Returns:
        List[str]: Existing input files.
    """
    files = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(
                os.path.join(path, f)
                for f in sorted(os.listdir(path))
                if f.endswith(".txt")
            )
        elif os.path.isfile(path):
            files.append(path)
        else:
            logger.warning("Skipping %s: not found", path)
    return files


def analyze_file(path: str, config: AnalysisConfig) -> Optional[dict]:
    """Analyzes a single text file.

    Args:
        path (str): Path to a UTF-8 text file.
        config (AnalysisConfig): Analysis settings.

    Returns:
        Optional[dict]: JSON-ready metrics, or None if the file is unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", path, e)
        return None

    result = analyze(text, config).model_dump(mode="json")
    result["_meta"] = {"filename": os.path.basename(path)}
    return result


def run(
    paths: List[str],
    config: AnalysisConfig,
    output_dir: Optional[str] = None,
    force: bool = False,
) -> int:
    """Analyzes every input file and writes or prints the results.

    Args:
        paths (List[str]): Files or directories to analyze.
        config (AnalysisConfig): Analysis settings.
        output_dir (Optional[str]): Directory for <name>.json outputs. Results
            are printed to stdout when omitted.
        force (bool): If True, overwrites existing output files.

    Returns:
        int: Process exit status.
    """
    files = collect_files(paths)
    if not files:
        logger.error("No input files found.")
        return 1

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)

    for path in tqdm(files, desc="Analyzing", disable=output_dir is None):
        if output_dir:
            basename = os.path.splitext(os.path.basename(path))[0]
            output_path = os.path.join(output_dir, f"{basename}.json")
            # Skip if already exists and force is False
            if os.path.exists(output_path) and not force:
                logger.info("%s already analyzed. Skipping.", basename)
                continue

        result = analyze_file(path, config)
        if result is None:
            continue

        if output_dir:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(result, f, ensure_ascii=False, indent=2)
        else:
            print(json.dumps(result, ensure_ascii=False))

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for batch analysis."""
    parser = argparse.ArgumentParser(description="Generate JSON stats from text files")
    parser.add_argument("paths", nargs="+", help="Text files or directories")
    parser.add_argument(
        "--exclude-spaces",
        action="store_true",
        help="Do not count whitespace characters",
    )
    parser.add_argument(
        "--limit", default=None, help="Soft character limit (ignored if not positive)"
    )
    parser.add_argument("--output", default=None, help="Directory for JSON output")
    parser.add_argument("--force", action="store_true", help="Overwrite existing stats")
    args = parser.parse_args(argv)

    setup_logging()
    config = AnalysisConfig(
        exclude_spaces=args.exclude_spaces, character_limit=args.limit
    )
    return run(args.paths, config, output_dir=args.output, force=args.force)


if __name__ == "__main__":
    sys.exit(main())
