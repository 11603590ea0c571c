"""Renderizado final de nombres IUPAC-lite."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from .locants import Sub

# Prefijos multiplicativos para sustituyentes idénticos; con más de tres
# se antepone el conteo ("4-methyl").
MULTIPLIER = {
    2: "di",
    3: "tri",
}


def multiplier_prefix(count: int) -> str:
    if count <= 1:
        return ""
    return MULTIPLIER.get(count, f"{count}-")


def render_name(substituents: Iterable[Sub], parent: str) -> str:
    """Renderiza el nombre combinando sustituyentes y padre.

    Los tokens `locante-nombre` se ordenan como cadenas de texto (con
    locantes de dos cifras "10" queda antes que "2") y los consecutivos con
    el mismo nombre se agrupan.

    Args:
        substituents: Iterable de sustituyentes con locantes.
        parent: Nombre padre (raíz más sufijo).

    Returns:
        Nombre final en formato IUPAC-lite.
    """
    tokens = sorted(f"{sub.locant}-{sub.name}" for sub in substituents)
    if not tokens:
        return parent
    return "-".join(combine_tokens(tokens)) + parent


def combine_tokens(tokens: List[str]) -> List[str]:
    """Agrupa tokens consecutivos con el mismo nombre de rama.

    Args:
        tokens: Tokens `locante-nombre` ya ordenados.

    Returns:
        Tokens combinados, p. ej. `["(2,3)-dimethyl"]`.
    """
    groups: List[Tuple[str, List[str]]] = []
    for token in tokens:
        locant, _, name = token.partition("-")
        if groups and groups[-1][0] == name:
            groups[-1][1].append(locant)
        else:
            groups.append((name, [locant]))

    blocks: List[str] = []
    for name, locants in groups:
        if len(locants) == 1:
            blocks.append(f"{locants[0]}-{name}")
            continue
        prefix = multiplier_prefix(len(locants))
        blocks.append(f"({','.join(locants)})-{prefix}{name}")
    return blocks
