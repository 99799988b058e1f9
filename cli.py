import argparse
import sys
import time
import requests
from colorama import Fore

import utils
from utils import log_with_time, vlog
from dictionary import load_trie
from dot_export import GraphRenderError, export_graph


def build_parser():
    parser = argparse.ArgumentParser(
        prog="prefix-tree",
        description="Build a trie from a word list, dump it as a Graphviz graph or complete prefixes.",
    )
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help=f"Word list, one word per line: a file path or http(s) URL (default: {utils.DICT_PATH})",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="subcommand", metavar="SUBCOMMAND")
    subparsers.required = True

    dot = subparsers.add_parser("dot", help="Dump the Trie into a Graphviz dot file and render it to SVG")
    dot.add_argument("--dot-file", type=str, default=None, help=f"Graph description output (default: {utils.DOT_PATH})")
    dot.add_argument("--svg-file", type=str, default=None, help=f"Rendered SVG output (default: {utils.SVG_PATH})")
    dot.add_argument("--no-render", action="store_true", help="Only write the dot file, do not call Graphviz")

    complete = subparsers.add_parser("complete", help="Suggest prefix autocompletion based on the Trie")
    complete.add_argument("prefix", type=str, help="Prefix to complete")
    complete.add_argument(
        "--loose",
        action="store_true",
        help="If the prefix is only partly in the Trie, complete from the longest matching part anyway",
    )
    return parser


def print_completions(trie, prefix, strict=True, out=None):
    out = out or sys.stdout
    count = 0
    for word in trie.iter_completions(prefix, strict=strict):
        print(word, file=out)
        count += 1
    return count


def run_cli(argv=None):
    """Parse ``argv``, run the chosen subcommand and return the process exit status."""
    args = build_parser().parse_args(argv)

    utils.start_time = time.time()
    utils.VERBOSE = args.verbose
    source = args.dictionary or utils.DICT_PATH

    try:
        trie = load_trie(source)
        if args.subcommand == "dot":
            export_graph(trie, args.dot_file, args.svg_file, render=not args.no_render)
        elif args.subcommand == "complete":
            t0 = time.time()
            strict = not args.loose
            count = print_completions(trie, args.prefix, strict=strict)
            if count == 0 and strict and not trie.has_prefix(args.prefix):
                vlog(f"Prefix '{args.prefix}' is not in the Trie")
            vlog(f"{count} completion(s) for '{args.prefix}'", t0)
    except FileNotFoundError as e:
        log_with_time(f"Could not find file: {e.filename}", color=Fore.RED)
        return 1
    except requests.RequestException as e:
        log_with_time(f"Could not download dictionary: {e}", color=Fore.RED)
        return 1
    except GraphRenderError as e:
        log_with_time(f"Graph rendering failed: {e}", color=Fore.RED)
        return 1
    except OSError as e:
        log_with_time(f"I/O error: {e}", color=Fore.RED)
        return 1
    except UnicodeDecodeError as e:
        log_with_time(f"Dictionary is not valid UTF-8: {e}", color=Fore.RED)
        return 1

    total_elapsed = time.time() - utils.start_time
    vlog(f"Done in {total_elapsed:.3f}s")
    return 0


def main():
    sys.exit(run_cli())
