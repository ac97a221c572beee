import os

import textscan.reveal as reveal


def test_windows_command(monkeypatch):
    monkeypatch.setattr(reveal.sys, "platform", "win32")
    path = os.path.abspath(os.path.join("My Docs", "a b.txt"))
    assert reveal.reveal_command(path) == f'explorer /select,"{path}"'


def test_macos_command(monkeypatch):
    monkeypatch.setattr(reveal.sys, "platform", "darwin")
    assert reveal.reveal_command("/x/y.txt")[:2] == ["open", "-R"]


def test_linux_prefers_selecting_file_manager(monkeypatch):
    monkeypatch.setattr(reveal.sys, "platform", "linux")
    monkeypatch.setattr(reveal.shutil, "which", lambda name: "/usr/bin/nautilus" if name == "nautilus" else None)
    path = os.path.abspath("/x/y.txt")
    assert reveal.reveal_command(path) == ["/usr/bin/nautilus", "--select", path]


def test_linux_falls_back_to_folder(monkeypatch):
    monkeypatch.setattr(reveal.sys, "platform", "linux")
    monkeypatch.setattr(reveal.shutil, "which", lambda name: None)
    path = os.path.abspath("/x/y.txt")
    assert reveal.reveal_command(path) == ["xdg-open", os.path.dirname(path)]


def test_launch_failure_is_reported_not_raised(monkeypatch):
    def broken(cmd, **kwargs):
        raise FileNotFoundError(2, "No such file", cmd[0])

    monkeypatch.setattr(reveal.subprocess, "Popen", broken)
    assert reveal.reveal_in_file_manager("/x/y.txt") is False


def test_launch(monkeypatch):
    seen = []
    monkeypatch.setattr(reveal.subprocess, "Popen", lambda cmd, **kwargs: seen.append(cmd))
    assert reveal.reveal_in_file_manager("/x/y.txt") is True
    assert seen == [reveal.reveal_command("/x/y.txt")]
