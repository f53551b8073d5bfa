from __future__ import annotations

from pathlib import Path

import pytest

from netnaming.sources.cmdline import ProcCmdlineReader


def _reader(tmp_path: Path, cmdline: str | None, *, initrd: bool = False) -> ProcCmdlineReader:
    path = tmp_path / "cmdline"
    if cmdline is not None:
        path.write_text(cmdline + "\n", encoding="utf-8")
    release = tmp_path / "initrd-release"
    if initrd:
        release.write_text("", encoding="utf-8")
    return ProcCmdlineReader(path=path, initrd_release=release)


@pytest.fixture(autouse=True)
def _no_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SYSTEMD_PROC_CMDLINE", raising=False)


def test_get_key(tmp_path: Path) -> None:
    reader = _reader(tmp_path, "BOOT_IMAGE=/vmlinuz root=/dev/sda1 ro net.naming-scheme=v249 quiet")
    assert reader.get_key("net.naming-scheme") == "v249"
    assert reader.get_key("root") == "/dev/sda1"


def test_dash_and_underscore_are_equivalent(tmp_path: Path) -> None:
    reader = _reader(tmp_path, "net.naming_scheme=v247")
    assert reader.get_key("net.naming-scheme") == "v247"


def test_last_occurrence_wins(tmp_path: Path) -> None:
    reader = _reader(tmp_path, "net.naming-scheme=v243 net.naming-scheme=v250")
    assert reader.get_key("net.naming-scheme") == "v250"


def test_missing_key_and_bare_key(tmp_path: Path) -> None:
    reader = _reader(tmp_path, "quiet net.naming-scheme splash")
    assert reader.get_key("net.naming-scheme") is None
    assert reader.get_key("quiet") is None


def test_quoted_values(tmp_path: Path) -> None:
    reader = _reader(tmp_path, 'opt="a b" net.naming-scheme="rhel-9.0"')
    assert reader.get_key("opt") == "a b"
    assert reader.get_key("net.naming-scheme") == "rhel-9.0"


def test_unterminated_quote_runs_to_end_of_line(tmp_path: Path) -> None:
    reader = _reader(tmp_path, 'opt="broken net.naming-scheme=v241')
    assert reader.get_key("net.naming-scheme") is None
    assert reader.get_key("opt") == "broken net.naming-scheme=v241"


def test_backslashes_are_kept(tmp_path: Path) -> None:
    reader = _reader(tmp_path, r'net.naming-scheme=a\b opt="C:\dir one"')
    assert reader.get_key("net.naming-scheme") == r"a\b"
    assert reader.get_key("opt") == r"C:\dir one"


def test_hash_is_not_a_comment(tmp_path: Path) -> None:
    reader = _reader(tmp_path, "console=tty0 #x net.naming-scheme=v252")
    assert reader.get_key("net.naming-scheme") == "v252"


def test_rd_prefix_only_in_initrd(tmp_path: Path) -> None:
    assert _reader(tmp_path, "rd.net.naming-scheme=v245").get_key("net.naming-scheme") is None
    reader = _reader(tmp_path, "rd.net.naming-scheme=v245", initrd=True)
    assert reader.get_key("net.naming-scheme") == "v245"


def test_unreadable_cmdline_is_absence(tmp_path: Path) -> None:
    assert _reader(tmp_path, None).get_key("net.naming-scheme") is None


def test_environment_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SYSTEMD_PROC_CMDLINE", "net.naming-scheme=v238")
    reader = _reader(tmp_path, "net.naming-scheme=v252")
    assert reader.get_key("net.naming-scheme") == "v238"
