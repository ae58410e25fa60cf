"""CLI command for comparing two strings in natural order."""

from string_util.interfaces import PresenterProtocol
from string_util.presenters import ConsolePresenter
from string_util.utils.sort_utils import natural_compare


def compare_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the compare subcommand.

    Prints ``less``, ``equal`` or ``greater``. Always succeeds.
    """
    presenter = presenter or ConsolePresenter()
    result = natural_compare(args.left, args.right)
    presenter.show_comparison(args.left, args.right, result)
    return 0
