from __future__ import annotations

import logging

from core.model import FormulaGraph

from .errors import CyclicFormulaError
from .molview import MolView

logger = logging.getLogger(__name__)


def close_ring_heuristic(graph: FormulaGraph) -> bool:
    """Cierra un anillo si hay al menos dos átomos con 3 enlaces totales.

    Heurística gruesa: une los dos primeros candidatos (orden de creación)
    con un enlace nuevo. No valida que el anillo sea químicamente correcto.

    Returns:
        `True` si se agregó el enlace de cierre.
    """
    candidates = graph.ring_closure_candidates()
    if len(candidates) < 2:
        return False
    first, second = candidates[0], candidates[1]
    graph.add_bond(first, second)
    logger.debug(
        "Added cyclic edge between %s and %s",
        graph.get_atom(first).key(),
        graph.get_atom(second).key(),
    )
    return True


def ensure_acyclic(graph: FormulaGraph) -> MolView:
    """Aplica la heurística de anillo y verifica aristas de retroceso.

    Returns:
        Vista del fragmento, lista para la búsqueda de cadena.

    Raises:
        CyclicFormulaError: Si el fragmento se considera cíclico.
    """
    if close_ring_heuristic(graph):
        raise CyclicFormulaError("Cyclic structures not supported")
    view = MolView(graph)
    if not view.is_acyclic():
        raise CyclicFormulaError("Cyclic structures not supported")
    return view
