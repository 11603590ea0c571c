"""Lectura de fórmulas moleculares condensadas (p. ej., `CH3CH2CH(Cl)CH3`).

El analizador recorre la cadena de izquierda a derecha con un cursor y una
pila explícita de puntos de ramificación. Es deliberadamente permisivo:
los caracteres no reconocidos se omiten y los símbolos desconocidos se
convierten en átomos de respaldo, sin lanzar excepciones.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from core.model import CARBON_LABEL, CARBOXYL_LABEL, FormulaGraph

logger = logging.getLogger(__name__)

# Símbolos de halógeno reconocidos (los de dos letras primero).
TWO_LETTER_HALOGENS = ("Cl", "Br")
ONE_LETTER_HALOGENS = ("F", "I")

ETHER_DELIMITER = "-O-"


def parse_formula(formula: str) -> FormulaGraph:
    """Convierte una fórmula condensada en un grafo etiquetado.

    Args:
        formula: Fórmula de un fragmento (sin el separador de éter).

    Returns:
        Grafo con los átomos y enlaces leídos.
    """
    graph = FormulaGraph()
    branch_points: List[Optional[int]] = []
    previous: Optional[int] = None
    size = len(formula)
    i = 0

    while i < size:
        ch = formula[i]

        if formula.startswith(CARBOXYL_LABEL, i):
            atom = graph.add_atom(CARBOXYL_LABEL)
            if previous is not None:
                graph.add_bond(previous, atom.id)
            previous = atom.id
            i += len(CARBOXYL_LABEL)
            continue

        # "Cl" es cloro, nunca un carbono seguido de "l".
        if ch == "C" and not formula.startswith("Cl", i):
            atom = graph.add_atom(CARBON_LABEL)
            i += 1
            if i < size and formula[i] == "H":
                count = 1
                i += 1
                if i < size and formula[i].isdigit():
                    count = int(formula[i])
                    i += 1
                atom.set_hydrogens(count)
            halogen = _halogen_at(formula, i)
            if halogen is not None:
                atom.add_halogen(halogen)
                i += len(halogen)
            if previous is not None:
                graph.add_bond(previous, atom.id)
            previous = atom.id
            continue

        if ch == "(":
            branch_points.append(previous)
            i += 1
            continue

        if ch == ")":
            if branch_points:
                previous = branch_points.pop()
            i += 1
            continue

        if ch.isalpha():
            symbol = ch
            if i + 1 < size and formula[i + 1].islower():
                symbol += formula[i + 1]
            halogen = _halogen_at(formula, i)
            if halogen is not None:
                if previous is not None:
                    graph.get_atom(previous).add_halogen(halogen)
                i += len(halogen)
                continue
            # Símbolo desconocido: átomo de respaldo con la etiqueta literal.
            atom = graph.add_atom(symbol)
            if previous is not None:
                graph.add_bond(previous, atom.id)
            previous = atom.id
            i += len(symbol)
            continue

        i += 1

    logger.debug("Parsed %r into %d atoms and %d bonds", formula, len(graph.atoms), len(graph.bonds))
    return graph


def split_ether(formula: str, delimiter: str = ETHER_DELIMITER) -> Optional[Tuple[str, str]]:
    """Separa una fórmula de éter en sus dos fragmentos.

    Args:
        formula: Fórmula completa.
        delimiter: Marcador del oxígeno puente.

    Returns:
        Tupla con ambos fragmentos o `None` si no hay separador.
    """
    pos = formula.find(delimiter)
    if pos < 0:
        return None
    return formula[:pos], formula[pos + len(delimiter):]


def _halogen_at(formula: str, index: int) -> Optional[str]:
    for symbol in TWO_LETTER_HALOGENS:
        if formula.startswith(symbol, index):
            return symbol
    if index < len(formula) and formula[index] in ONE_LETTER_HALOGENS:
        return formula[index]
    return None
