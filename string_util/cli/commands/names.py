"""CLI command for generating random names."""

import logging
import random

from string_util.config import create_default_config
from string_util.exceptions import StringUtilException
from string_util.interfaces import PresenterProtocol
from string_util.presenters import ConsolePresenter
from string_util.services import NameGenerator

logger = logging.getLogger(__name__)


def names_command(args, presenter: PresenterProtocol | None = None) -> int:
    """Execute the names subcommand.

    Args:
        args: Parsed command-line arguments
        presenter: Output target (console by default)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = presenter or ConsolePresenter()

    try:
        config = create_default_config()
        rng = random.Random(args.seed) if args.seed is not None else None
        generator = NameGenerator(config, rng=rng)
        names = generator.generate_many(args.count, syllable_count=args.syllables)
    except StringUtilException as e:
        presenter.show_error(f"Error: {e}")
        return 1

    logger.info(f"Generated {len(names)} names")
    presenter.show_lines(names)
    return 0
