import subprocess

from mtime_sync.main import main, parse_args
from mtime_sync.timestamps.setter import CommandRunner


def fake_success(calls):
    def run(self, argv):
        calls.append(argv)
        return subprocess.CompletedProcess(argv, 0, stderr="")
    return run


def test_parse_args_defaults():
    args = parse_args(["a.md"])
    assert args.files == ["a.md"]
    assert args.workers == 4
    assert args.utility == "SetFile"
    assert args.timeout is None
    assert not args.detailed


def test_single_file_success(monkeypatch, capsys, vault):
    calls = []
    monkeypatch.setattr(CommandRunner, "run", fake_success(calls))

    code = main(["--root", str(vault), "--lang", "en", "a.md"])

    assert code == 0
    assert calls[0][-1] == str(vault / "a.md")
    assert "Synced modification time to creation time" in capsys.readouterr().out


def test_batch_with_failure_exits_nonzero(monkeypatch, capsys, vault):
    calls = []
    monkeypatch.setattr(CommandRunner, "run", fake_success(calls))

    code = main(["--root", str(vault), "--lang", "en", "a.md", "daily/c.md", "missing.md"])

    assert code == 1
    assert len(calls) == 2
    assert "Done: 2, Failed: 1" in capsys.readouterr().out


def test_missing_utility_reports_error(capsys, vault):
    code = main(["--root", str(vault), "--lang", "en", "--utility", "no-such-setfile-tool", "a.md"])

    assert code == 1
    assert "Error syncing time (running SetFile):" in capsys.readouterr().out


def test_japanese_output(monkeypatch, capsys, vault):
    monkeypatch.setattr(CommandRunner, "run", fake_success([]))

    code = main(["--root", str(vault), "--lang", "ja", "a.md", "b.md"])

    assert code == 0
    assert "完了: 2 件, 失敗: 0 件" in capsys.readouterr().out


def test_invalid_worker_count(vault):
    assert main(["--root", str(vault), "--workers", "0", "a.md"]) == 2


def test_absolute_argument_resolved_inside_root(monkeypatch, tmp_path, vault):
    calls = []
    monkeypatch.setattr(CommandRunner, "run", fake_success(calls))
    outside = tmp_path / "outside.md"
    outside.write_text("x")

    code = main(["--root", str(vault), "--lang", "en", str(outside)])

    assert code == 1
    assert calls == []


def test_folder_argument_skipped_in_batch(monkeypatch, capsys, vault):
    calls = []
    monkeypatch.setattr(CommandRunner, "run", fake_success(calls))

    code = main(["--root", str(vault), "--lang", "en", "daily", "a.md"])

    assert code == 0
    assert [argv[-1] for argv in calls] == [str(vault / "a.md")]
    assert "Done: 1, Failed: 0" in capsys.readouterr().out
