"""
Discovery of candidate files in the home directory.
"""
import logging
import os

LOGGER = logging.getLogger(__name__)


def resolve_home(home=None):
    """Return the absolute home directory, raising OSError when unusable."""
    path = os.path.expanduser(home) if home else os.path.expanduser('~')
    if not path or path == '~':
        raise OSError('cannot determine home directory')
    path = os.path.abspath(path)
    if not os.path.isdir(path):
        raise NotADirectoryError(f'not a directory: {path}')
    return path


def discover_dotfiles(home, include_directories=False, dotfiles_only=True, exclude=()):
    """List ``(label, path)`` pairs for files directly inside ``home``.

    Entries come back sorted by name. Names listed in ``exclude`` are skipped,
    which keeps the stache directory itself out of the list.
    """
    skipped = set(exclude)
    items = []
    with os.scandir(home) as it:
        entries = sorted(it, key=lambda e: e.name)
    for entry in entries:
        name = entry.name
        if name in skipped:
            continue
        if dotfiles_only and not name.startswith('.'):
            continue
        try:
            is_dir = entry.is_dir()
        except OSError:
            LOGGER.debug('skipping unreadable entry %s', entry.path, exc_info=True)
            continue
        if is_dir and not include_directories:
            continue
        items.append((name, os.path.join(home, name)))
    LOGGER.debug('discovered %d candidate(s) in %s', len(items), home)
    return items
