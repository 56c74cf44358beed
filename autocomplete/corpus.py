# autocomplete/corpus.py
from __future__ import annotations
import os
from typing import Iterator, Tuple

class CorpusReader:
    def __init__(self, docs_dir: str, suffix: str = ".txt"):
        if not os.path.exists(docs_dir):
            raise FileNotFoundError(f"Dossier de documents introuvable : {docs_dir}")
        if not os.path.isdir(docs_dir):
            raise NotADirectoryError(f"Ce n'est pas un dossier : {docs_dir}")
        self.docs_dir = docs_dir
        ## trie des fichiers .txt (ordre déterministe), les sous-dossiers sont ignorés
        self.files = sorted(
            f for f in os.listdir(docs_dir)
            if f.endswith(suffix) and os.path.isfile(os.path.join(docs_dir, f))
        )
    ## len() retourne ici le nombre de fichiers qu'on a dans docs_dir
    def __len__(self) -> int:
        return len(self.files)
    ## retourne toute la liste des fichiers si limit est None sinon les `limit` premiers
    def list_files(self, limit: int | None = None):
        return self.files if limit is None else self.files[:limit]

    def read(self, doc_id: str) -> str:
        path = os.path.join(self.docs_dir, doc_id)
        with open(path, encoding="utf-8", errors="ignore") as f:
            return f.read()

    ## générateur : on ne garde pas tous les documents en mémoire
    def iter_docs(self) -> Iterator[Tuple[str, str]]:
        for fname in self.files:
            yield fname, self.read(fname)
