import io

import pytest

from syspulse.config import Settings
from syspulse.menu import MenuController
from syspulse.models import DiskUsage, MemoryUsage, SystemSnapshot
from syspulse.theme import ANSI, Theme, ThemePreference
from conftest import MIB


class FakeMetrics:
    def __init__(self):
        self.paths = []

    def snapshot(self, path):
        self.paths.append(path)
        return SystemSnapshot(cpu_percent=12.0,
                              memory=MemoryUsage(MIB, 4 * MIB),
                              disk=DiskUsage(path, 0, 1),
                              disk_path=path,
                              uptime_sec=61)


@pytest.fixture
def make_menu(tmp_path):
    def make(keys, root=None):
        settings = Settings(root=str(root or tmp_path), animation_delay=0.0,
                            theme_file=str(tmp_path / "theme.cfg"))
        out = io.StringIO()
        metrics = FakeMetrics()
        menu = MenuController(settings, metrics, ThemePreference(settings.theme_file),
                              io.StringIO("".join(k + "\n" for k in keys)), out)
        return menu, out, metrics
    return make


def test_exit(make_menu):
    menu, out, _ = make_menu(["0"])
    menu.run()
    assert "SYSTEM PERFORMANCE MONITOR" in out.getvalue()
    assert out.getvalue().endswith("Exiting program. Goodbye!\n")
    assert not menu.running


def test_eof_exits(make_menu):
    menu, out, _ = make_menu([])
    menu.run()
    assert "Goodbye!" in out.getvalue()


def test_invalid_choices(make_menu):
    menu, out, _ = make_menu(["7", "abc", "0"])
    menu.run()
    assert out.getvalue().count("Invalid choice. Please try again.") == 2


def test_scan_system(make_menu):
    menu, out, metrics = make_menu(["1", "", "0"])
    menu.run()
    text = out.getvalue()
    assert "Scanning System..." in text
    assert "CPU Usage: 12%" in text
    assert "System Uptime: 0d 0h 1m 1s" in text
    assert "[GOOD] Your system is running smoothly." in text
    assert "Press Enter to return to menu..." in text
    assert len(metrics.paths) == 1


def test_folder_usage(make_menu, tree):
    menu, out, _ = make_menu(["2", "", "0"], root=tree)
    menu.run()
    text = out.getvalue()
    assert "Top Folder Usage (Approx.):" in text
    assert "B [" + "#" * 50 + "] 35 MB" in text


def test_folder_usage_missing_root(make_menu, tmp_path):
    missing = tmp_path / "missing"
    menu, out, _ = make_menu(["2", "", "0"], root=missing)
    menu.run()
    assert f"Cannot access folder: {missing}" in out.getvalue()
    assert "Scanning folders" not in out.getvalue()


def test_change_theme_persists(make_menu, tmp_path):
    menu, out, _ = make_menu(["3", "3", "0"])
    menu.run()
    assert "Theme changed successfully!" in out.getvalue()
    assert ANSI[Theme.GREEN] in out.getvalue()
    assert (tmp_path / "theme.cfg").read_text() == "10"
    assert menu.theme is Theme.GREEN


def test_change_theme_invalid(make_menu, tmp_path):
    menu, out, _ = make_menu(["3", "9", "0"])
    menu.run()
    assert "Invalid choice, keeping current theme." in out.getvalue()
    assert not (tmp_path / "theme.cfg").exists()


def test_saved_theme_applied_on_start(make_menu, tmp_path):
    (tmp_path / "theme.cfg").write_text("12")
    menu, out, _ = make_menu(["0"])
    menu.run()
    assert out.getvalue().startswith(ANSI[Theme.RED])
