import os, sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

import subprocess
import pytest

import dot_export
from dot_export import GraphRenderError
from trie import Trie


@pytest.fixture
def trie():
    return Trie.build(["a", "ab", "ac"])


def test_write_dot(tmp_path, trie):
    path = tmp_path / "trie.dot"
    dot_export.write_dot(trie, str(path))
    assert path.read_text(encoding="utf-8") == trie.serialize_to_graph_description()


def test_render_svg_success(tmp_path, monkeypatch):
    seen = {}

    def fake_run(cmd, capture_output=False):
        seen["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, stdout=b"<svg></svg>\n", stderr=b"")

    monkeypatch.setattr(dot_export.subprocess, "run", fake_run)
    dot_path = str(tmp_path / "trie.dot")
    svg = tmp_path / "trie.svg"
    dot_export.render_svg(dot_path, str(svg))
    assert seen["cmd"] == ["dot", "-Tsvg", dot_path]
    assert svg.read_text(encoding="utf-8") == "<svg></svg>\n"


def test_render_svg_failure_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.setattr(
        dot_export.subprocess,
        "run",
        lambda cmd, capture_output=False: subprocess.CompletedProcess(cmd, 1, stdout=b"", stderr=b"syntax error"),
    )
    svg = tmp_path / "trie.svg"
    with pytest.raises(GraphRenderError) as exc:
        dot_export.render_svg(str(tmp_path / "trie.dot"), str(svg))
    assert exc.value.returncode == 1
    assert "syntax error" in str(exc.value)
    assert not svg.exists()


def test_render_svg_missing_binary(tmp_path, monkeypatch):
    def fake_run(cmd, capture_output=False):
        raise FileNotFoundError(2, "No such file or directory", cmd[0])

    monkeypatch.setattr(dot_export.subprocess, "run", fake_run)
    with pytest.raises(GraphRenderError) as exc:
        dot_export.render_svg(str(tmp_path / "trie.dot"), str(tmp_path / "trie.svg"), binary="no-such-dot")
    assert "no-such-dot" in str(exc.value)
    assert isinstance(exc.value.__cause__, FileNotFoundError)


def test_export_graph_without_render(tmp_path, monkeypatch, trie):
    def fail_run(*a, **kw):
        raise AssertionError("dot should not run")

    monkeypatch.setattr(dot_export.subprocess, "run", fail_run)
    dot_path = tmp_path / "out.dot"
    dot_export.export_graph(trie, str(dot_path), str(tmp_path / "out.svg"), render=False)
    assert dot_path.exists()
    assert not (tmp_path / "out.svg").exists()


def test_export_graph_uses_default_paths(tmp_path, monkeypatch, trie):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(
        dot_export.subprocess,
        "run",
        lambda cmd, capture_output=False: subprocess.CompletedProcess(cmd, 0, stdout=b"<svg/>", stderr=b""),
    )
    dot_export.export_graph(trie)
    assert (tmp_path / "trie.dot").exists()
    assert (tmp_path / "trie.svg").read_text(encoding="utf-8") == "<svg/>"
