"""Command-line subcommands"""

import logging


def configure_logging(debug: bool = False) -> None:
    """
    Configure logging as early as possible for a subcommand

    Args:
        debug: Log at DEBUG instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    # Silence very noisy third-party loggers (matplotlib font discovery etc.)
    for noisy in ("matplotlib", "matplotlib.font_manager", "PIL", "PIL.Image", "fontTools"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("utxopack").setLevel(logging.DEBUG if debug else logging.INFO)
