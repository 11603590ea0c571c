"""Selección de cadena principal para nomenclatura IUPAC-lite.

La cadena principal es el camino simple más largo entre carbonos. Se busca
con un DFS de enumeración de caminos (con retroceso) sobre una pila
explícita: la memoria queda acotada por la longitud del camino, aunque el
tiempo es exponencial en el factor de ramificación en el peor caso.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Set

from .molview import MolView


def longest_path_from(
    view: MolView, start: int, ignored: Optional[Set[int]] = None
) -> List[int]:
    """Camino simple más largo que comienza en `start`.

    Los vecinos se exploran en orden de inserción y un camino solo reemplaza
    al mejor si es estrictamente más largo, de modo que ante empates gana
    el primero encontrado.

    Args:
        view: Vista del grafo molecular.
        start: Nodo inicial.
        ignored: Nodos que nunca forman parte del camino.

    Returns:
        Lista de IDs desde `start` hasta el extremo más lejano.
    """
    ignored = ignored or set()
    path: List[int] = [start]
    on_path: Set[int] = {start}
    best: List[int] = [start]
    frontier: List[Iterator[int]] = [iter(view.neighbors(start))]

    while frontier:
        advanced = False
        for nbr in frontier[-1]:
            if nbr in on_path or nbr in ignored:
                continue
            path.append(nbr)
            on_path.add(nbr)
            frontier.append(iter(view.neighbors(nbr)))
            if len(path) > len(best):
                best = list(path)
            advanced = True
            break
        if not advanced:
            # Retroceso: el nodo vuelve a estar disponible para otras ramas.
            frontier.pop()
            on_path.discard(path.pop())

    return best


def longest_carbon_chain(view: MolView) -> List[int]:
    """Encuentra la cadena de carbono más larga por doble barrido.

    El primer recorrido (desde el carbono de menor ID) encuentra un extremo;
    el segundo, desde ese extremo, devuelve el camino completo.

    Args:
        view: Vista del grafo molecular.

    Returns:
        Lista de IDs de la cadena principal (vacía si no hay carbonos).
    """
    carbon_nodes = sorted(view.carbon_atoms())
    if not carbon_nodes:
        return []
    ignored = view.ignored_atoms()
    first = longest_path_from(view, carbon_nodes[0], ignored)
    return longest_path_from(view, first[-1], ignored)


def longest_carboxyl_chain(view: MolView) -> List[int]:
    """Cadena más larga anclada en un grupo carboxilo.

    Se recorre desde cada carboxilo y se conserva el camino estrictamente
    más largo; el carboxilo queda como primer elemento.

    Args:
        view: Vista del grafo molecular.

    Returns:
        Lista de IDs con el carboxilo en la posición 1 (vacía si no hay).
    """
    ignored = view.ignored_atoms()
    best: List[int] = []
    for cooh in sorted(view.carboxyl_atoms()):
        path = longest_path_from(view, cooh, ignored)
        if len(path) > len(best):
            best = path
    return best
