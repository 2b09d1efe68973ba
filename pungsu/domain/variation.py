"""Générateur de variations seedé pour la diversité des formulations.

Chaque analyse instancie son propre `SeededVariation` et le transmet explicitement au
compositeur de rapport: deux analyses ne partagent jamais de curseur. La suite produite
dépend de l'ordre des appels; les scores n'en dépendent jamais.
"""

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

LUCKY_NUMBER_MAX = 45


class SeededVariation:
    """Suite pseudo-aléatoire reproductible: `x = sin(seed++) * 10000; x - floor(x)`."""

    def __init__(self, seed: int):
        self.seed = seed

    @classmethod
    def for_person(cls, name: str, month: int) -> "SeededVariation":
        """Graine = longueur du nom + mois de naissance."""
        return cls(len(name) + month)

    def next(self) -> float:
        """Valeur suivante dans [0, 1); avance le curseur."""
        x = math.sin(self.seed) * 10000
        self.seed += 1
        return x - math.floor(x)

    def pick(self, options: Sequence[T]) -> T:
        """Choisit une option (consomme une valeur)."""
        return options[self._index(len(options))]

    def _index(self, size: int) -> int:
        return min(int(self.next() * size), size - 1)

    def coin(self) -> bool:
        """Pile ou face (consomme une valeur)."""
        return self.next() < 0.5

    def lucky_numbers(self) -> tuple[int, int]:
        """Paire de numéros porte-bonheur entre 1 et 45 (consomme deux valeurs).

        Si le second tirage répète le premier, il est décalé au numéro suivant.
        """
        first = self._index(LUCKY_NUMBER_MAX) + 1
        second = self._index(LUCKY_NUMBER_MAX) + 1
        if second == first:
            second = first % LUCKY_NUMBER_MAX + 1
        return first, second
