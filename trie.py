# trie.py
# Arena-backed prefix tree: nodes live in one list, children are referenced by index.

from typing import Callable, Dict, Iterable, Iterator, List, MutableSequence, Tuple

ROOT = 0


class Trie:
    """
    Prefix tree with the API the CLI needs:
      - Trie.build(words) -> Trie
      - insert(word)
      - descend(prefix) -> node          (deepest node reached, never fails)
      - walk(prefix) -> (node, matched)
      - contains(word) / has_prefix(prefix) -> bool
      - enumerate_completions(node, buffer, prefix_label, emit)
      - completions(prefix, strict=True) -> List[str]
      - serialize_to_graph_description() -> str
    Internals:
      nodes: List[{'term': bool, 'edges': Dict[str, int]}]
      node 0 is the root.
    """

    __slots__ = ("_nodes",)

    def __init__(self):
        # nodes[i] = {'term': bool, 'edges': {char: child_index}}
        self._nodes: List[Dict] = [{"term": False, "edges": {}}]

    # ---------- Building ----------
    @classmethod
    def build(cls, words: Iterable[str]) -> "Trie":
        """Build a trie holding every word, inserted as-is (no normalization)."""
        trie = cls()
        for w in words:
            trie.insert(w)
        return trie

    def insert(self, word: str) -> None:
        """Add ``word``, creating missing nodes along its path. The empty word marks the root."""
        nodes = self._nodes
        cur = ROOT
        for ch in word:
            edges: Dict[str, int] = nodes[cur]["edges"]
            nxt = edges.get(ch)
            if nxt is None:
                nodes.append({"term": False, "edges": {}})
                nxt = len(nodes) - 1
                edges[ch] = nxt
            cur = nxt
        nodes[cur]["term"] = True

    # ---------- Lookup ----------
    def walk(self, prefix: str, node: int = ROOT) -> Tuple[int, int]:
        """Follow ``prefix`` from ``node``; return (deepest node reached, chars matched)."""
        nodes = self._nodes
        matched = 0
        for ch in prefix:
            nxt = nodes[node]["edges"].get(ch)
            if nxt is None:
                break
            node = nxt
            matched += 1
        return node, matched

    def descend(self, prefix: str, node: int = ROOT) -> int:
        """
        Return the node reached by following ``prefix``. Descent stops at the
        first missing character, so the result may stand for a shorter prefix.
        """
        return self.walk(prefix, node)[0]

    def has_prefix(self, prefix: str) -> bool:
        """True if prefix is a path from the root (empty string is always a prefix)."""
        return self.walk(prefix)[1] == len(prefix)

    def contains(self, word: str) -> bool:
        """True if ``word`` was inserted."""
        node, matched = self.walk(word)
        return matched == len(word) and self.is_terminal(node)

    __contains__ = contains

    def is_terminal(self, node: int) -> bool:
        return bool(self._nodes[node]["term"])

    def children(self, node: int) -> Dict[str, int]:
        """Edge map of ``node``: char -> child node. Treat as read-only."""
        return self._nodes[node]["edges"]

    # ---------- Completion ----------
    def enumerate_completions(
        self,
        node: int,
        buffer: MutableSequence[str],
        prefix_label: str,
        emit: Callable[[str], None],
    ) -> None:
        """
        Depth-first walk below ``node``. Every terminal node reached reports
        ``prefix_label`` plus the characters collected in ``buffer`` on the way
        down. Terminal nodes keep descending, so "cat" and "catalog" both come out.
        ``buffer`` is restored to its original contents on return.
        """
        for word in self._walk_subtree(node, buffer, prefix_label):
            emit(word)

    def _walk_subtree(self, node: int, buffer: MutableSequence[str], prefix_label: str) -> Iterator[str]:
        # Explicit stack of edge iterators, one per level below ``node``;
        # buffer holds one char per level except the first.
        nodes = self._nodes
        if nodes[node]["term"]:
            yield prefix_label + "".join(buffer)
        stack = [iter(nodes[node]["edges"].items())]
        while stack:
            for ch, child in stack[-1]:
                buffer.append(ch)
                entry = nodes[child]
                if entry["term"]:
                    yield prefix_label + "".join(buffer)
                stack.append(iter(entry["edges"].items()))
                break
            else:
                stack.pop()
                if stack:
                    buffer.pop()

    def iter_completions(self, prefix: str, strict: bool = True) -> Iterator[str]:
        """
        Yield every stored word reachable under ``prefix``, each spelled as
        ``prefix`` followed by the suffix found in the tree.

        With ``strict`` (the default) an only partly present prefix yields
        nothing. With ``strict=False`` the walk continues from the deepest
        matched node and the full requested prefix is still prepended, which
        can report words that are not actually stored.
        """
        node, matched = self.walk(prefix)
        if strict and matched != len(prefix):
            return
        yield from self._walk_subtree(node, [], prefix)

    def completions(self, prefix: str, strict: bool = True) -> List[str]:
        return list(self.iter_completions(prefix, strict=strict))

    # ---------- Graph export ----------
    def serialize_to_graph_description(self, name: str = "Trie") -> str:
        """
        Render the tree as a Graphviz digraph. Each node gets an id ``Node_<n>``
        in DFS pre-order (root is ``Node_0``, labelled "root"); every other node
        is labelled with its character, and each parent->child edge carries the
        child's character.
        """
        nodes = self._nodes
        lines = [f"digraph {name} {{", '  Node_0 [label="root"]']
        next_id = 1
        # (parent dot id, char, arena index); reversed pushes keep edge order
        stack: List[Tuple[int, str, int]] = [
            (0, ch, child) for ch, child in reversed(list(nodes[ROOT]["edges"].items()))
        ]
        while stack:
            parent_id, ch, node = stack.pop()
            node_id = next_id
            next_id += 1
            label = _dot_escape(ch)
            lines.append(f'  Node_{node_id} [label="{label}"]')
            lines.append(f'  Node_{parent_id} -> Node_{node_id} [label="{label}"]')
            for c, child in reversed(list(nodes[node]["edges"].items())):
                stack.append((node_id, c, child))
        lines.append("}")
        return "\n".join(lines) + "\n"

    # ---------- Stats ----------
    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def word_count(self) -> int:
        return sum(1 for n in self._nodes if n["term"])

    def __len__(self) -> int:
        return self.word_count


def _dot_escape(label: str) -> str:
    return label.replace("\\", "\\\\").replace('"', '\\"')
