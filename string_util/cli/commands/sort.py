"""CLI command for naturally sorting lines of text."""

import logging
from pathlib import Path

from string_util.interfaces import PresenterProtocol
from string_util.presenters import ConsolePresenter
from string_util.utils.file_utils import read_lines
from string_util.utils.sort_utils import natural_sort

logger = logging.getLogger(__name__)


def sort_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the sort subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output target (console by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()
    path = Path(args.file) if args.file else None

    if path is not None and not path.exists():
        presenter.show_error(f"Input file not found: {path}")
        return 1

    try:
        lines = read_lines(path)
    except (OSError, UnicodeDecodeError) as e:
        presenter.show_error(f"Could not read input: {e}")
        return 1

    if not lines:
        presenter.show_warning("No input lines to sort")

    logger.info(f"Sorting {len(lines)} lines")
    natural_sort(lines, reverse=args.reverse)
    presenter.show_lines(lines)
    return 0
