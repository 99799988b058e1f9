import time
import requests

import utils
from utils import log_with_time, vlog
from trie import Trie


def is_url(source):
    return source.startswith(("http://", "https://"))


def split_lines(text):
    """Split on ``\\n``, dropping a trailing ``\\r`` per line and the empty tail after a final newline."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_words(source):
    """Return the lines of ``source`` (a path or an http(s) URL) without line terminators.

    Blank lines are kept: they stand for the empty word.
    """
    if is_url(source):
        vlog(f"Downloading dictionary from {source}")
        resp = requests.get(source, timeout=utils.DICT_TIMEOUT)
        resp.raise_for_status()
        text = resp.text
    else:
        with open(source, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    return split_lines(text)


def load_trie(source):
    t0 = time.time()
    log_with_time(f"⟳ Loading dictionary {source}…")
    words = read_words(source)
    trie = Trie.build(words)
    vlog(f"Trie built ({trie.node_count} nodes)", t0)
    log_with_time(f"✅ {len(words)} lines, {len(trie)} distinct words")
    return trie
