"""Entry point for letterpool.

Usage:
    python -m letterpool.main                          # interactive window
    python -m letterpool.main --dictionary words.txt   # pick the word file
    python -m letterpool.main --builtin en             # pyspellchecker word list
    python -m letterpool.main --solve listen           # print suggestions and exit
"""
import sys
import signal
import logging
import argparse

from letterpool.dictionary import DictionaryError, load_builtin_words, load_word_list
from letterpool.letters import count_letters, format_account
from letterpool.suggest import SuggestionEngine

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def load_words(args, config):
    """Load the dictionary chosen on the command line, falling back to config."""
    if args.builtin is not None:
        return load_builtin_words(args.builtin or config.builtin_language)
    return load_word_list(args.dictionary or config.dictionary_path)


def run_solve(engine: SuggestionEngine, letters: str, used: str = "", out=None):
    """Headless mode: print what can be spelled from `letters` minus `used`."""
    out = out or sys.stdout
    account = count_letters(used, letters)
    logger.debug("Account: %s", format_account(account))
    suggestions = engine.refresh("", account)
    for i, word in enumerate(suggestions):
        print(f"{i}: {word}", file=out)
    return suggestions


def run_gui(engine: SuggestionEngine, config):
    """Run the interactive window until the user quits."""
    from PyQt5.QtWidgets import QApplication
    from letterpool.session import EditingSession
    from letterpool.window import SuggestWindow

    app = QApplication(sys.argv)
    app.setApplicationName("letterpool")

    session = EditingSession(engine)
    window = SuggestWindow(session, config)
    window.show()

    exit_code = app.exec_()
    logger.info("Session closed")
    return exit_code


def build_parser():
    parser = argparse.ArgumentParser(
        prog="letterpool",
        description="Suggest dictionary words that fit the letters you have left",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--dictionary", metavar="PATH",
                        help="Word list, one word per line (default from config: words.txt)")
    source.add_argument("--builtin", nargs="?", const="", metavar="LANG",
                        help="Use the pyspellchecker word list for LANG (default from config: en)")
    parser.add_argument("--solve", metavar="LETTERS",
                        help="Print suggestions for LETTERS and exit (no window)")
    parser.add_argument("--used", default="", metavar="USED",
                        help="Letters already used, subtracted from --solve LETTERS")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    from letterpool.config import Config

    args = build_parser().parse_args(argv)
    config = Config()
    setup_logging(args.debug or config.debug_logging)
    if not config.path.exists():
        try:
            config.save()
            logger.info("Wrote default config to %s", config.path)
        except OSError as e:
            logger.warning("Cannot write config %s: %s", config.path, e)

    try:
        words = load_words(args, config)
    except DictionaryError as e:
        logger.error("%s", e)
        return 1

    engine = SuggestionEngine(words)

    if args.solve is not None:
        run_solve(engine, args.solve, args.used)
        return 0
    return run_gui(engine, config)


if __name__ == "__main__":
    sys.exit(main())
