# dot_export.py
# Writes the trie as a Graphviz file and renders it through the `dot` binary.

import subprocess
import time

import utils
from utils import log_with_time, vlog


class GraphRenderError(RuntimeError):
    """The `dot` process could not be started or exited with a failure status."""

    def __init__(self, message, returncode=None, stderr=""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


def write_dot(trie, path):
    t0 = time.time()
    with open(path, "w", encoding="utf-8") as f:
        f.write(trie.serialize_to_graph_description())
    vlog(f"Wrote {trie.node_count} nodes to {path}", t0)


def render_svg(dot_path, svg_path, binary=None):
    """Run ``dot -Tsvg dot_path`` and save its output to ``svg_path``.

    Nothing is written unless the process exits with status 0.
    """
    cmd = [binary or utils.DOT_BINARY, "-Tsvg", dot_path]
    t0 = time.time()
    try:
        proc = subprocess.run(cmd, capture_output=True)
    except OSError as e:
        raise GraphRenderError(f"Could not run {cmd[0]!r}: {e}") from e
    if proc.returncode != 0:
        stderr = proc.stderr.decode("utf-8", errors="replace").strip()
        raise GraphRenderError(
            f"{cmd[0]} exited with status {proc.returncode}" + (f": {stderr}" if stderr else ""),
            returncode=proc.returncode,
            stderr=stderr,
        )
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(proc.stdout.decode("utf-8", errors="replace"))
    vlog(f"Rendered {svg_path}", t0)


def export_graph(trie, dot_path=None, svg_path=None, render=True):
    dot_path = dot_path or utils.DOT_PATH
    svg_path = svg_path or utils.SVG_PATH
    write_dot(trie, dot_path)
    log_with_time(f"Graph written to {dot_path}")
    if render:
        render_svg(dot_path, svg_path)
        log_with_time(f"Graph rendered to {svg_path}")
