import importlib
import sys
import unittest
from pathlib import Path

from tests._support import purge_stache_modules


def _ensure_project_root_on_path():
    root = str(Path(__file__).resolve().parents[1])
    if root not in sys.path:
        sys.path.insert(0, root)
    return Path(root)


class PackageInitTests(unittest.TestCase):
    def test_runtime_import_exposes_version(self):
        purge_stache_modules()
        project_root = _ensure_project_root_on_path()
        package = importlib.import_module("stache")
        self.assertEqual(package.__version__, "0.3.0")
        self.assertEqual(Path(package.__file__).resolve(), project_root / "stache" / "__init__.py")

    def test_theme_lookup_falls_back_to_default(self):
        theme = importlib.import_module("stache.theme")
        self.assertEqual([t.key for t in theme.list_themes()], ["pastel", "classic", "mono"])
        self.assertEqual(theme.get_theme(None).key, "pastel")
        self.assertEqual(theme.get_theme("unknown").key, "pastel")
        for item in theme.list_themes():
            self.assertEqual(set(item.pairs_base), set(theme.ROLE_TO_PAIR_ID))


if __name__ == "__main__":
    unittest.main()
