"""Integration tests: DesktopActions with real platform backends on the local filesystem."""

import os
import sys

import pytest

from desktop_actions import DesktopActions, DesktopConfig, MissingFileError, ShortcutCreationError

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="POSIX backends only")


def test_linux_desktop_entry_on_desktop(home_dir, tmp_path):
    target = tmp_path / "editor.sh"
    target.write_text("#!/bin/sh\n")
    target.chmod(0o755)
    actions = DesktopActions(DesktopConfig(type="linux", home_dir=home_dir))

    actions.create_shortcut(str(target))

    entry = home_dir / "Desktop" / "editor.desktop"
    assert entry.exists()
    assert "Type=Application" in entry.read_text(encoding="utf-8")


def test_linux_missing_desktop_folder(tmp_path):
    actions = DesktopActions(DesktopConfig(type="linux", home_dir=tmp_path / "nobody"))

    with pytest.raises(ShortcutCreationError) as exc_info:
        actions.create_shortcut("/usr/bin/env")

    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_darwin_symlink_on_desktop(home_dir, tmp_path):
    target = tmp_path / "Notes"
    target.mkdir()
    actions = DesktopActions(DesktopConfig(type="darwin", home_dir=home_dir))

    actions.create_shortcut(str(target))

    link = home_dir / "Desktop" / "Notes"
    assert link.is_symlink()
    assert os.readlink(link) == str(target)


def test_headless_linux_reports_unsupported(monkeypatch, tmp_path):
    monkeypatch.delenv("DISPLAY", raising=False)
    monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
    actions = DesktopActions(DesktopConfig(type="linux"))

    assert actions.is_desktop_supported() is False
    with pytest.raises(MissingFileError):
        actions.move_to_trash(tmp_path / "never-created")
