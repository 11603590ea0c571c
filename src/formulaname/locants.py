"""Cálculo de locantes y orientación de la cadena principal.

La orientación compara, como listas, los locantes de los átomos con ramas
en ambos sentidos y elige el lexicográficamente menor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from .substituents import Branch, branch_name


@dataclass(frozen=True)
class Sub:
    """Representa un sustituyente con su nombre y locante."""
    name: str
    locant: int


def choose_orientation(
    chain: Sequence[int],
    branches: Dict[int, List[Branch]],
    anchored: bool = False,
) -> List[int]:
    """Elige la orientación de la cadena según reglas de locantes.

    Args:
        chain: Cadena principal candidata.
        branches: Ramas por átomo de la cadena.
        anchored: La cadena está anclada en un carboxilo y no se invierte.

    Returns:
        Cadena orientada (lista de IDs) que minimiza locantes.
    """
    forward = list(chain)
    if anchored:
        return forward
    left, right = _locant_keys(forward, branches)
    if left <= right:
        return forward
    return list(reversed(forward))


def _locant_keys(
    chain: Sequence[int], branches: Dict[int, List[Branch]]
) -> Tuple[List[int], List[int]]:
    """Locantes de átomos con ramas, de izquierda a derecha y al revés."""
    left = [idx + 1 for idx, atom_id in enumerate(chain) if branches.get(atom_id)]
    right = [
        idx + 1 for idx, atom_id in enumerate(reversed(chain)) if branches.get(atom_id)
    ]
    return left, right


def substituents_on_chain(
    chain: Sequence[int], branches: Dict[int, List[Branch]]
) -> List[Sub]:
    """Devuelve los sustituyentes de la cadena ya orientada.

    Args:
        chain: Cadena principal orientada.
        branches: Ramas por átomo de la cadena.

    Returns:
        Lista de sustituyentes con su locante (1-based) en la cadena.
    """
    substituents: List[Sub] = []
    for idx, atom_id in enumerate(chain):
        for branch in branches.get(atom_id, []):
            substituents.append(Sub(branch_name(branch), idx + 1))
    return substituents
