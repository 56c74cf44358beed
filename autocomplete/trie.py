# autocomplete/trie.py
from __future__ import annotations
from typing import Callable, Dict, Iterable, Iterator, List, Tuple


class Node:
    """
    Un noeud du trie :
      - children:    caractère -> noeud enfant
      - is_terminal: True si un mot inséré se termine ici
      - suggestions: suggestions attachées à ce mot (ordre d'insertion, doublons permis)
    """
    __slots__ = ("children", "is_terminal", "suggestions")

    def __init__(self):
        self.children: Dict[str, Node] = {}
        self.is_terminal: bool = False
        self.suggestions: List[str] = []


class Index:
    """
    Trie de suggestions : insert(mot, suggestion) puis search(préfixe).
    On construit une fois (au démarrage) puis on ne fait que lire.
    """
    def __init__(self):
        # la racine représente la chaîne vide
        self.root = Node()
        self._n_inserts = 0
        self._n_nodes = 1

    # nombre d'appels à insert (les doublons comptent)
    def __len__(self) -> int:
        return self._n_inserts

    @property
    def node_count(self) -> int:
        return self._n_nodes

    def insert(self, word: str, suggestion: str) -> None:
        node = self.root
        for ch in word:
            child = node.children.get(ch)
            # seul endroit où on crée des noeuds
            if child is None:
                child = Node()
                node.children[ch] = child
                self._n_nodes += 1
            node = child
        # mot vide -> c'est la racine qui devient terminale
        node.is_terminal = True
        node.suggestions.append(suggestion)
        self._n_inserts += 1

    def _walk(self, prefix: str) -> Node | None:
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def contains(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def _iter_subtree(self, node: Node, prefix: str) -> Iterator[Tuple[str, str]]:
        # parcours en profondeur avec une pile explicite :
        # d'abord les suggestions du noeud, puis les enfants par code croissant
        stack = [(node, prefix)]
        while stack:
            current, word = stack.pop()
            if current.is_terminal:
                for s in current.suggestions:
                    yield word, s
            # on empile à l'envers pour dépiler le plus petit caractère en premier
            for ch in sorted(current.children, reverse=True):
                stack.append((current.children[ch], word + ch))

    def iter_search(self, prefix: str) -> Iterator[str]:
        """Version paresseuse de search() : même ordre, une suggestion à la fois."""
        node = self._walk(prefix)
        if node is None:
            return
        for _, s in self._iter_subtree(node, prefix):
            yield s

    def search(self, prefix: str) -> List[str]:
        """
        Toutes les suggestions sous le préfixe. Si le préfixe n'existe pas
        dans le trie on renvoie [] (pas de résultat partiel).
        """
        return list(self.iter_search(prefix))

    def search_pairs(self, prefix: str) -> List[Tuple[str, str]]:
        """Comme search() mais chaque suggestion est accompagnée du mot complet trouvé."""
        node = self._walk(prefix)
        if node is None:
            return []
        return list(self._iter_subtree(node, prefix))


# ---------- Construction ----------
def default_suggestion(word: str) -> str:
    return f'Suggestion for "{word}"'


def build_index(pairs: Iterable[Tuple[str, str]]) -> Index:
    idx = Index()
    for word, suggestion in pairs:
        idx.insert(word, suggestion)
    return idx


def build_index_from_words(words: Iterable[str], suggestion_for: Callable[[str], str] = default_suggestion) -> Index:
    # les mots sont passés explicitement, la politique de suggestion est injectée
    return build_index((w, suggestion_for(w)) for w in words)
