"""Write the three invoice reports for the built-in sample line-items.

The workbooks land in `--output-dir`, or in the configured output directory
(the Desktop by default) when the flag is omitted.
"""

from __future__ import annotations

import argparse
import pathlib

from invoice_exports.pipeline import run_exports
from invoice_exports.sample import sample_line_items
from invoice_exports.utils.logging import configure_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser("Export invoice line-items to Excel reports")
    parser.add_argument(
        "--output-dir",
        type=pathlib.Path,
        default=None,
        help="Directory for the workbooks (defaults to INVOICE_EXPORTS_OUTPUT_DIR or the Desktop)",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()

    written = run_exports(sample_line_items(), args.output_dir)
    for name, path in written.items():
        print(f"{name}: {path}")


if __name__ == "__main__":
    main()
