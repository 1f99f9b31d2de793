# tests/test_dump_idx.py
from dictidx.idxio import IdxWriter
from dictidx.tools.dump_idx import format_senses, main
from dictidx.store import Sense


def _make(tmp_path, name="d.idx", width=4):
    p = tmp_path / name
    with IdxWriter(p, width=width) as w:
        w.add("cat", 16, 5)
        w.add("cat", 32, 3)
        w.add("dog", 40, 9)
    return str(p)


def test_summary_and_lookup(tmp_path, capsys):
    p = _make(tmp_path)
    assert main([p, "--lookup", "cat", "eel"]) == 0
    out = capsys.readouterr().out
    assert "headwords=2 senses=3" in out
    assert "cat: 2 sense(s) @16+5 @32+3" in out
    assert "eel: not found" in out


def test_dump_with_limit(tmp_path, capsys):
    p = _make(tmp_path, "d.idx.gz", width=8)
    assert main([p, "--is64", "--dump", "--limit", "1"]) == 0
    out = capsys.readouterr().out
    assert "cat: 2 sense(s)" in out
    assert "dog:" not in out


def test_error_exit_code(tmp_path, capsys):
    assert main([str(tmp_path / "missing.idx")]) == 2
    assert "[idx] error:" in capsys.readouterr().err


def test_truncated_exit_code(tmp_path, capsys):
    p = tmp_path / "t.idx"
    p.write_bytes(b"cat\x00\x00\x00")
    assert main([str(p)]) == 2
    assert "Truncated record" in capsys.readouterr().err


def test_format_senses_non_utf8_key():
    key = b"caf\xe9".decode("utf-8", "surrogateescape")
    assert format_senses(key, [Sense(1, 2)]) == "caf\ufffd: 1 sense(s) @1+2"
