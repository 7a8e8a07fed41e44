"""
ArgTree — Groups a flat argument vector into positional nodes

Each node is one positional token plus the cluster of flags that directly
follow it:

    je -j myproj          ->  [je (-j)] [myproj]
    je list --label       ->  [je] [list (--label)]
    je add x ./a.c ./     ->  [je] [add] [x] [./a.c] [./]

Node 0 is always the program name; its flags are global flags that precede
any subcommand. Every token lands in exactly one node, either as its value
or as one of its flags, so concatenating the nodes rebuilds the input.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

from ..errors import ParseError


# Flags collected per node before a new node is forced
MAX_FLAGS = 16


def is_flag(token: str) -> bool:
    """A token is a flag when it starts with '-'."""
    return token.startswith("-")


@dataclass
class ArgNode:
    """One positional value and the flags immediately after it."""
    value: str
    flags: List[str] = field(default_factory=list)

    def has_flag(self, short: Optional[str] = None, long: Optional[str] = None) -> bool:
        """
        Check the whole flag cluster for either form of a flag.

        Args:
            short: Short form (e.g., "-j"), or None
            long: Long form (e.g., "--jump"), or None

        Returns:
            True if either form appears anywhere in the cluster.
            With both forms None, True if the node has any flag at all.
        """
        if short is None and long is None:
            return bool(self.flags)
        return any(flag in (short, long) for flag in self.flags)

    def unknown_flags(self, *allowed: str) -> List[str]:
        """Flags in this cluster that are not in `allowed`."""
        return [flag for flag in self.flags if flag not in allowed]

    def tokens(self) -> List[str]:
        """The tokens this node was built from, in input order."""
        return [self.value, *self.flags]


class ArgTree:
    """
    Ordered sequence of ArgNodes built once per invocation.

    Index access is bounds-checked: asking for a node that is not there is
    a normal condition and returns None.
    """

    def __init__(self, nodes: List[ArgNode]):
        self.nodes = nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[ArgNode]:
        return iter(self.nodes)

    def __repr__(self) -> str:
        return f"ArgTree({self.nodes!r})"

    def get(self, index: int) -> Optional[ArgNode]:
        """Node at `index`, or None when out of range."""
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    @property
    def program(self) -> Optional[ArgNode]:
        """The program-name node (global flags live here)."""
        return self.get(0)

    def tokens(self) -> List[str]:
        """Rebuild the original token sequence."""
        result: List[str] = []
        for node in self.nodes:
            result.extend(node.tokens())
        return result


def parse(tokens: Sequence[str]) -> ArgTree:
    """
    Build an ArgTree from the full argument vector (index 0 = program name).

    Flag collection for a node stops at the first non-flag token, at the end
    of input, or after MAX_FLAGS flags; the next token then starts a new node
    even if it is itself a flag.

    Raises:
        ParseError: if `tokens` is not a sequence of strings
    """
    for position, token in enumerate(tokens):
        if not isinstance(token, str):
            raise ParseError(f"argument {position} is not text: {token!r}")

    nodes: List[ArgNode] = []
    i = 0
    count = len(tokens)

    while i < count:
        node = ArgNode(value=tokens[i])
        i += 1

        while i < count and is_flag(tokens[i]) and len(node.flags) < MAX_FLAGS:
            node.flags.append(tokens[i])
            i += 1

        nodes.append(node)

    return ArgTree(nodes)
