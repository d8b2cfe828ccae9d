import io

import pytest
from fivewords import cli
from fivewords.settings import Settings

WORDS = "fjord\ngucks\nNymph\nvibex\nwaltz\nfloor\nslate\nleast\n"


@pytest.fixture
def cfg(monkeypatch):
    fresh = Settings()
    fresh.NTFY_TOPIC = ""
    monkeypatch.setattr(cli, "settings", fresh)
    return fresh


def test_main_prints_solution(tmp_path, capsys, cfg):
    path = tmp_path / "words.txt"
    path.write_text(WORDS, encoding="utf-8")

    assert cli.main([str(path), "--workers", "1"]) == 0
    out = capsys.readouterr().out
    # a, e, l, s, t are counted twice, so vibex holds the rarest remaining letter
    assert out.splitlines() == ["vibex gucks fjord nymph waltz"]


def test_main_missing_file(tmp_path, capsys, cfg):
    assert cli.main([str(tmp_path / "missing.txt"), "--workers", "1"]) == 1
    assert capsys.readouterr().out == ""


def test_main_zero_solutions_is_success(tmp_path, capsys, cfg):
    path = tmp_path / "words.txt"
    path.write_text("fjord\ngucks\n", encoding="utf-8")
    assert cli.main([str(path), "--workers", "1"]) == 0
    assert capsys.readouterr().out == ""


def test_main_applies_flags(tmp_path, cfg):
    path = tmp_path / "words.txt"
    path.write_text(WORDS, encoding="utf-8")
    cli.main([str(path), "--workers", "1", "--unique", "--notify-topic", ""])
    assert cfg.WORKERS == 1
    assert cfg.UNIQUE is True
    assert cfg.WORDS_PATH == path


def test_run_unique_collapses_boundary_repeats(cfg):
    lines = ["fjord", "gucks", "nymph", "vibex", "waltz", "qophs", "qaids", "tranq"]
    cfg.WORKERS = 1

    raw = cli.run(cfg, lines, out=io.StringIO())
    cfg.UNIQUE = True
    out = io.StringIO()
    unique = cli.run(cfg, lines, out=out)

    assert len(unique) == len({frozenset(s) for s in raw})
    assert out.getvalue().count("\n") == len(unique)


def test_run_notifies_when_topic_set(cfg, monkeypatch):
    calls = []

    async def fake_send(solutions, word_count, timings, topic, ntfy_url):
        calls.append((len(solutions), word_count, topic))
        return True

    monkeypatch.setattr("fivewords.notifier.send_notification", fake_send)
    cfg.WORKERS = 1
    cfg.NTFY_TOPIC = "quintets"
    cli.run(cfg, ["fjord", "gucks", "nymph", "vibex", "waltz"], out=io.StringIO())
    assert calls == [(1, 5, "quintets")]
