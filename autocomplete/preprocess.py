from __future__ import annotations
import re  ## utile pour les expressions régulières
from typing import List ## annotation de type List

from unidecode import unidecode ## é -> e, etc.

class TextPreprocessor:
    ## on découpe sur les suites de caractères qui ne sont pas des lettres/chiffres/_
    SPLIT_REGEXP = re.compile(r"\W+")
    ## options : minuscules, suppression des accents, garder les tokens vides, dédoublonner
    def __init__(self, lowercase: bool = True, strip_accents: bool = False,
                 keep_empty: bool = False, unique: bool = False):
        self.lowercase = lowercase
        self.strip_accents = strip_accents
        self.keep_empty = keep_empty
        self.unique = unique

    ## minuscules et (option) retrait des accents
    def normalize(self, text: str) -> str:
        if self.lowercase:
            text = text.lower()
        if self.strip_accents:
            text = unidecode(text)
        return text

    ## re.split renvoie un token vide si le texte commence ou finit par un séparateur
    def tokenize(self, text: str) -> List[str]:
        tokens = self.SPLIT_REGEXP.split(text)
        if not self.keep_empty:
            tokens = [t for t in tokens if t]
        return tokens

    ## garde la première occurrence de chaque token
    def dedupe(self, tokens: List[str]) -> List[str]:
        if not self.unique:
            return tokens
        return list(dict.fromkeys(tokens))

    def process(self, text: str) -> List[str]:
        # Stratégie : normaliser → tokeniser → dédoublonner
        text = self.normalize(text)
        tokens = self.tokenize(text)
        tokens = self.dedupe(tokens)
        return tokens
