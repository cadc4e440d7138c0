ALPHABET_SIZE = 26
MIN_WORD_LENGTH = 3


def index(ch: str) -> int:
    """
    Map a lowercase letter to its child slot.

    Args:
        ch (str): A single character in 'a'..'z'.

    Returns:
        int: The slot index, 0 for 'a' through 25 for 'z'.

    Raises:
        ValueError: If ``ch`` is not a lowercase ASCII letter.
    """
    if len(ch) != 1 or not "a" <= ch <= "z":
        raise ValueError(f"not a lowercase letter: {ch!r}")
    return ord(ch) - ord("a")


def letter_counts(line: str) -> list[int]:
    """
    Turn a line of available letters into a per-letter count list.

    Whitespace only separates letters visually and is skipped.

    Args:
        line (str): The letters, e.g. ``"c a t s s"``.

    Returns:
        list[int]: 26 counts, indexed like the child slots.

    Raises:
        ValueError: If the line contains anything but a-z and whitespace.
    """
    counts = [0] * ALPHABET_SIZE
    for ch in line:
        if ch.isspace():
            continue
        counts[index(ch)] += 1
    return counts


class TrieNode:
    """
    A single node in the trie.

    Attributes:
        children (list[TrieNode | None]):
            One slot per letter 'a'..'z'; None where no child exists.
        is_end (bool):
            True if this node marks the end of a valid word.
        word (str):
            The complete word ending here; only set when is_end is True.
    """
    __slots__ = ("children", "is_end", "word")

    def __init__(self):
        self.children = [None] * ALPHABET_SIZE
        self.is_end = False
        self.word = ""


class Trie:
    """
    A trie over lowercase words supporting insertion, search, prefix
    queries, pruning deletion, and enumeration of the words that can be
    spelled from a budget of letters.
    """

    def __init__(self):
        """Initialize an empty trie."""
        self.root = TrieNode()

    def _walk(self, key: str):
        # Node at the end of key's path, or None if the path breaks.
        node = self.root
        for ch in key:
            if not "a" <= ch <= "z":
                return None
            node = node.children[ord(ch) - ord("a")]
            if node is None:
                return None
        return node

    # -------------------------------------------------------------
    # Core Operations
    # -------------------------------------------------------------

    def insert(self, word: str) -> None:
        """
        Insert a word into the trie.

        Only the missing nodes along the word's path are allocated.

        Args:
            word (str): The word to insert, lowercase a-z only.

        Raises:
            ValueError: If the word is empty or has a non-lowercase letter.
        """
        if not word:
            raise ValueError("cannot insert an empty word")
        slots = [index(ch) for ch in word]

        node = self.root
        for i in slots:
            if node.children[i] is None:
                node.children[i] = TrieNode()
            node = node.children[i]
        node.is_end = True
        node.word = word

    def search(self, key: str) -> bool:
        """
        Determine whether a word exists in the trie.

        Args:
            key (str): The word to search for.

        Returns:
            bool: True if the word exists, False otherwise.
        """
        node = self._walk(key)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """
        Check if any word in the trie begins with the given prefix.

        Args:
            prefix (str): The prefix to test.

        Returns:
            bool: True if at least one word begins with the prefix.
        """
        return self._walk(prefix) is not None

    @staticmethod
    def count_child(node: TrieNode) -> int:
        """Return how many of the node's child slots are occupied."""
        return sum(1 for child in node.children if child is not None)

    def clear(self, node: TrieNode = None) -> int:
        """
        Destroy every descendant of a node, leaving its slots empty.

        Called without a node it empties the whole trie; the root itself
        is never removed.

        Args:
            node (TrieNode): The subtree to clear. Defaults to the root.

        Returns:
            int: The number of nodes destroyed, not counting ``node``.
        """
        if node is None:
            node = self.root

        freed = 0
        for i, child in enumerate(node.children):
            if child is not None:
                freed += self.clear(child) + 1
                node.children[i] = None
        return freed

    # -------------------------------------------------------------
    # Additional Functionalities
    # -------------------------------------------------------------

    def delete(self, key: str) -> bool:
        """
        Delete a word from the trie, pruning nodes nothing else uses.

        A word that is a prefix of other words only loses its terminal
        mark. A word ending in a leaf is cut off at the highest node that
        exists for it alone: the child, along the path, of the deepest
        node that is the root, terminal, or a branch point.

        Args:
            key (str): The word to delete.

        Returns:
            bool: True if the word was deleted,
                  False if the word was not present.
        """
        node = self.root
        cut_parent, cut_slot = None, None
        for ch in key:
            if not "a" <= ch <= "z":
                return False
            i = ord(ch) - ord("a")
            child = node.children[i]
            if child is None:
                return False
            if node is self.root or node.is_end or self.count_child(node) > 1:
                cut_parent, cut_slot = node, i
            node = child

        if not node.is_end:
            return False

        if self.count_child(node) > 0:
            node.is_end = False
            node.word = ""
            return True

        # target is a leaf; the chain from the cut point down is dead
        self.clear(cut_parent.children[cut_slot])
        cut_parent.children[cut_slot] = None
        return True

    def find_prefix(self, prefix: str) -> list[str]:
        """
        Retrieve all words in the trie that share a given prefix.

        Args:
            prefix (str): The prefix to match.

        Returns:
            list[str]: The matching words in lexicographic order; empty
                when no key has this prefix.
        """

        def _collect(node, out):
            if node.is_end:
                out.append(node.word)
            for child in node.children:
                if child is not None:
                    _collect(child, out)

        node = self._walk(prefix)
        result = []
        if node is not None:
            _collect(node, result)
        return result

    def longest_prefix(self, key: str) -> str:
        """
        Find the longest leading part of ``key`` present as a trie path.

        The match is structural: it need not end on a stored word.

        Args:
            key (str): The key to match.

        Returns:
            str: The matched prefix, "" if even the first letter is absent.
        """
        node = self.root
        matched = 0
        for ch in key:
            if not "a" <= ch <= "z":
                break
            node = node.children[ord(ch) - ord("a")]
            if node is None:
                break
            matched += 1
        return key[:matched]

    # -------------------------------------------------------------
    # Word Building
    # -------------------------------------------------------------

    def dfs(self, node: TrieNode, counts: list[int], slot, result: list[str]) -> None:
        """
        Collect the words below ``node`` that fit within ``counts``.

        ``counts`` has already been charged for the letter ``slot`` that led
        into ``node``; a negative count there means that letter ran out.
        Counts are restored on the way back up.

        Args:
            node (TrieNode): Current node.
            counts (list[int]): Remaining letters, one entry per slot.
            slot (int | None): Inbound letter index, None at the root.
            result (list[str]): Words found so far, in discovery order.
        """
        if slot is not None and counts[slot] < 0:
            return

        if node.is_end and len(node.word) >= MIN_WORD_LENGTH:
            result.append(node.word)

        for i, child in enumerate(node.children):
            if child is not None:
                counts[i] -= 1
                self.dfs(child, counts, i, result)
                counts[i] += 1

    def words_from_letters(self, counts: list[int]) -> list[str]:
        """
        List every stored word of three or more letters that can be built
        from the available letters, using each no more often than counted.

        Args:
            counts (list[int]): 26 letter counts, see :func:`letter_counts`.

        Returns:
            list[str]: Matches in depth-first discovery order.

        Raises:
            ValueError: If ``counts`` does not have 26 entries.
        """
        if len(counts) != ALPHABET_SIZE:
            raise ValueError(f"expected {ALPHABET_SIZE} letter counts, got {len(counts)}")
        result = []
        self.dfs(self.root, list(counts), None, result)
        return result

    # -------------------------------------------------------------
    # Container Protocol
    # -------------------------------------------------------------

    def __contains__(self, key: str) -> bool:
        return self.search(key)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def node_count(self) -> int:
        """Number of nodes below the root."""

        def _count(node):
            return sum(_count(c) + 1 for c in node.children if c is not None)

        return _count(self.root)

    def __iter__(self):
        """
        Iterate over all words stored in the trie.

        Yields:
            str: Next word in lexicographic order.
        """

        def _walk(node):
            if node.is_end:
                yield node.word
            for child in node.children:
                if child is not None:
                    yield from _walk(child)

        yield from _walk(self.root)
