"""CLI command for rendering delimited rows as a text table."""

import csv
import logging
from pathlib import Path

from string_util.config import create_default_config
from string_util.exceptions import StringUtilException
from string_util.interfaces import PresenterProtocol
from string_util.presenters import ConsolePresenter
from string_util.utils.file_utils import read_lines, split_lines
from string_util.utils.table_utils import generate_string_table

logger = logging.getLogger(__name__)


def table_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the table subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output target (console by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    config = create_default_config()

    delimiter = args.delimiter or config.csv_delimiter
    separator = args.separator if args.separator is not None else config.table_separator
    include_headers = args.headers or config.table_include_headers

    path = Path(args.file) if args.file else None
    if path is not None and not path.exists():
        presenter.show_error(f"Input file not found: {path}")
        return 1

    try:
        lines = read_lines(path)
        rows = [row for row in csv.reader(lines, delimiter=delimiter) if row]
        if not rows:
            presenter.show_warning("No rows to render")
        logger.info(f"Rendering {len(rows)} rows")
        table = generate_string_table(rows, separator=separator, include_headers=include_headers)
    except StringUtilException as e:
        presenter.show_error(f"Error: {e}")
        return 1
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        presenter.show_error(f"Could not read input: {e}")
        return 1

    presenter.show_lines(split_lines(table))
    return 0
