"""Ramas sobre la cadena principal y tablas de nombres IUPAC-lite."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Sequence, Set

from .molview import MolView


class Halogen(IntEnum):
    """Códigos de halógeno de una rama (0 = sin halógeno)."""
    NONE = 0
    CHLORO = 1
    BROMO = 2
    FLUORO = 3
    IODO = 4


class NameSuffix(IntEnum):
    """Modo de sufijo del nombre padre."""
    ANE = 0  # alcano
    AN = 1   # raíz para "-oic acid"
    YL = 2   # fragmento de éter


# Símbolo -> código, en el orden de prioridad con que se buscan en etiquetas.
HALOGEN_SYMBOLS: Dict[str, Halogen] = {
    "Cl": Halogen.CHLORO,
    "Br": Halogen.BROMO,
    "F": Halogen.FLUORO,
    "I": Halogen.IODO,
}

# Mapeo de halógenos a prefijos de sustituyentes.
HALO_MAP: Dict[int, str] = {
    Halogen.CHLORO: "chloro",
    Halogen.BROMO: "bromo",
    Halogen.FLUORO: "fluoro",
    Halogen.IODO: "iodo",
}

# Raíces de la cadena principal.
STEMS: Dict[int, str] = {
    1: "Meth",
    2: "Eth",
    3: "Prop",
    4: "But",
    5: "Pent",
    6: "Hex",
    7: "Hept",
    8: "Oct",
    9: "Non",
    10: "Dec",
}

SUFFIXES: Dict[NameSuffix, str] = {
    NameSuffix.ANE: "ane",
    NameSuffix.AN: "an",
    NameSuffix.YL: "yl",
}

# Sustituyentes alquilo lineales (más allá de 4 carbonos no hay nombre).
ALKYL: Dict[int, str] = {
    1: "methyl",
    2: "ethyl",
    3: "propyl",
    4: "butyl",
}

ACID_SUFFIX = "oic acid"


@dataclass(frozen=True)
class Branch:
    """Rama colgada de un átomo de la cadena: carbonos y halógeno."""
    carbons: int
    halogen: Halogen = Halogen.NONE


def parent_name(length: int, suffix: NameSuffix = NameSuffix.ANE) -> str:
    """Nombre padre a partir de la longitud de la cadena.

    Args:
        length: Número de átomos de la cadena principal.
        suffix: Modo de sufijo ("ane", "an" o "yl").

    Returns:
        Raíz más sufijo; longitudes fuera de 1-10 dejan la raíz vacía.
    """
    return STEMS.get(length, "") + SUFFIXES[suffix]


def branch_name(branch: Branch) -> str:
    """Devuelve el prefijo de una rama.

    Un halógeno domina sobre el conteo de carbonos. Los alquilos de más de
    cuatro carbonos devuelven cadena vacía.
    """
    if branch.halogen > 0:
        return HALO_MAP.get(branch.halogen, "halo")
    return ALKYL.get(branch.carbons, "")


def chain_atom_halogen(view: MolView, atom_id: int) -> Halogen:
    """Identifica el halógeno unido directamente a un átomo de la cadena.

    Usa el primer símbolo registrado al leer la fórmula; si no hay, busca
    los símbolos en la etiqueta (Cl, Br, F, I). Por defecto, cloro.
    """
    symbols = view.halogen_symbols(atom_id)
    if symbols and symbols[0] in HALOGEN_SYMBOLS:
        return HALOGEN_SYMBOLS[symbols[0]]
    label = view.label(atom_id)
    for symbol, kind in HALOGEN_SYMBOLS.items():
        if symbol in label:
            return kind
    return Halogen.CHLORO


def count_branch(view: MolView, start: int, chain_set: Set[int]) -> Branch:
    """Cuenta carbonos y detecta un halógeno en la rama que nace en `start`.

    Recorrido iterativo confinado a átomos fuera de la cadena. Solo se
    registra el primer halógeno encontrado; las etiquetas no reconocidas
    no aportan nada.

    Args:
        view: Vista del grafo molecular.
        start: Primer átomo de la rama.
        chain_set: Átomos de la cadena principal.

    Returns:
        Rama con su número de carbonos y código de halógeno.
    """
    visited: Set[int] = {start}
    stack: List[int] = [start]
    carbons = 0
    halogen = Halogen.NONE

    while stack:
        node = stack.pop()
        label = view.label(node)
        if label == "C":
            carbons += 1
        elif label in HALOGEN_SYMBOLS and halogen == Halogen.NONE:
            halogen = HALOGEN_SYMBOLS[label]
        for nbr in view.neighbors(node):
            if nbr in visited or nbr in chain_set:
                continue
            visited.add(nbr)
            stack.append(nbr)

    return Branch(carbons, halogen)


def branches_on_chain(view: MolView, chain: Sequence[int]) -> Dict[int, List[Branch]]:
    """Registra todas las ramas de cada átomo de la cadena.

    Cada vecino fuera de la cadena (y no ignorado) produce su propia entrada;
    los halógenos directos producen una entrada `Branch(0, código)`.

    Args:
        view: Vista del grafo molecular.
        chain: Cadena principal en orden.

    Returns:
        Diccionario átomo -> lista de ramas (solo átomos con ramas).
    """
    chain_set = set(chain)
    ignored = view.ignored_atoms()
    branches: Dict[int, List[Branch]] = {}

    for atom_id in chain:
        if view.halogen_count(atom_id) > 0:
            kind = chain_atom_halogen(view, atom_id)
            branches.setdefault(atom_id, []).append(Branch(0, kind))
        for nbr in view.neighbors(atom_id):
            if nbr in ignored or nbr in chain_set:
                continue
            branches.setdefault(atom_id, []).append(count_branch(view, nbr, chain_set))

    return branches
