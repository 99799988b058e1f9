# --- utils.py ---

import sys
import time
from colorama import Fore, Style, init

init()

# Default locations, overridable from the command line
DICT_PATH = "dictionary.txt"
DOT_PATH = "trie.dot"
SVG_PATH = "trie.svg"
DOT_BINARY = "dot"

# Seconds to wait on a dictionary download
DICT_TIMEOUT = 10

VERBOSE = False
start_time = None


def log_with_time(msg, color=Fore.LIGHTBLUE_EX):
    """Print ``msg`` to stderr with a timestamp relative to ``start_time``."""
    global start_time
    if start_time is None:
        start_time = time.time()
    elapsed = time.time() - start_time
    mins = int(elapsed // 60)
    secs = elapsed % 60
    timestamp = Style.DIM + f"[{mins:02}:{secs:06.3f}]" + Style.RESET_ALL
    print(f"{timestamp} {color}{msg}{Style.RESET_ALL}", file=sys.stderr, flush=True)


def vlog(msg, t0=None):
    if VERBOSE:
        if t0 is not None:
            elapsed = time.time() - t0
            log_with_time(f"{msg} (took {elapsed:.3f}s)")
        else:
            log_with_time(msg)
