"""
Entry point for Stache.
"""
import argparse
import curses
import locale
import logging
import os
import traceback
from pathlib import Path

from . import __version__
from .core.app import StacheApp
from .core.config import load_config
from .core.engine import ClassifierEngine
from .core.plan import resolve_target_dir
from .core.scan import discover_dotfiles, resolve_home
from .theme import THEMES

LOGGER = logging.getLogger(__name__)

# Ensure UTF-8
try:
    locale.setlocale(locale.LC_ALL, '')
except locale.Error:
    pass


def default_log_path():
    return Path.home() / '.cache' / 'stache' / 'stache.log'


def configure_logging(debug):
    """Send debug logs to a file; curses owns the terminal."""
    if not debug:
        return
    log_path = Path(os.environ.get('STACHE_LOG_FILE') or default_log_path())
    log_path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=logging.DEBUG,
        filename=str(log_path),
        format='[%(levelname)s] %(name)s: %(message)s'
    )


def build_parser():
    parser = argparse.ArgumentParser(
        prog='stache',
        description='Pick home-directory dotfiles to manage from a central directory.',
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--home', help='directory to scan (default: your home directory)')
    parser.add_argument('--target', help='link target directory, relative to home unless absolute')
    parser.add_argument('--config', help='path to config.toml')
    parser.add_argument('--theme', choices=sorted(THEMES), help='color theme')
    parser.add_argument('--include-dirs', action='store_true', default=None,
                        help='list directories as well as files')
    parser.add_argument('--all-files', action='store_true',
                        help='list every entry, not only names starting with "."')
    parser.add_argument('--debug', action='store_true',
                        help='log to $STACHE_LOG_FILE and fail fast on internal errors')
    return parser


def build_engine(args, config):
    """Scan the home directory and build the classification engine."""
    home = resolve_home(args.home)
    target_dir = args.target or config.target_dir
    target_path = resolve_target_dir(home, target_dir)
    exclude = {os.path.basename(target_path)} if os.path.dirname(target_path) == home else set()
    include_dirs = config.include_directories if args.include_dirs is None else True
    items = discover_dotfiles(
        home,
        include_directories=include_dirs,
        dotfiles_only=config.dotfiles_only and not args.all_files,
        exclude=exclude,
    )
    LOGGER.debug('scanned %s: %d candidate(s), target %s', home, len(items), target_path)
    return ClassifierEngine.from_items(items, home, target_dir, strict=args.debug)


def run(argv=None):
    """Run Stache and return process exit code."""
    args = build_parser().parse_args(argv)
    args.debug = bool(args.debug or os.environ.get('STACHE_DEBUG'))
    configure_logging(args.debug)
    config = load_config(args.config)
    theme = args.theme or config.theme

    try:
        engine = build_engine(args, config)
    except OSError as e:
        print(f'Error reading directory: {e}')
        return 1

    session = {}

    def main(stdscr):
        app = StacheApp(stdscr, engine, theme=theme)
        session['app'] = app
        app.run()

    try:
        curses.wrapper(main)
        print('\033c', end='')
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        # Restore the terminal before reporting.
        try:
            curses.endwin()
        except curses.error:
            pass
        print(f'\nError: {e}')
        traceback.print_exc()
        return 1

    app = session.get('app')
    if app is not None:
        for line in app.plan_lines():
            print(line)
    return 0


def main_cli():
    """Console script entrypoint."""
    return run()


if __name__ == '__main__':
    raise SystemExit(main_cli())
