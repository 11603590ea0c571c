"""Vista de trabajo sobre el grafo de una fórmula.

`MolView` construye, para cada fragmento, una adyacencia entera propia a
partir de los átomos y enlaces del grafo leído. Conserva los IDs asignados
por el analizador, de modo que ningún estado se comparte entre fragmentos.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set, Tuple

from core.model import FormulaAtom, FormulaGraph


class MolView:
    """Adaptador de solo lectura sobre `FormulaGraph`."""

    def __init__(self, graph: FormulaGraph) -> None:
        """Inicializa la vista y su adyacencia.

        Args:
            graph: Grafo producido por el analizador de fórmulas.

        Side Effects:
            Copia la adyacencia; cambios posteriores al grafo no se reflejan.
        """
        self.graph = graph
        self._adj: Dict[int, List[int]] = {atom_id: [] for atom_id in graph.atoms}
        for a1, a2 in graph.edges():
            self._adj.setdefault(a1, []).append(a2)
            self._adj.setdefault(a2, []).append(a1)

    def atoms(self) -> List[int]:
        """Devuelve los IDs atómicos en orden de creación."""
        return list(self._adj.keys())

    def atom(self, atom_id: int) -> Optional[FormulaAtom]:
        return self.graph.atoms.get(atom_id)

    def label(self, atom_id: int) -> str:
        """Etiqueta del átomo ("" si el ID no se puede resolver)."""
        atom = self.atom(atom_id)
        return atom.label if atom is not None else ""

    def key(self, atom_id: int) -> str:
        atom = self.atom(atom_id)
        return atom.key() if atom is not None else f"?{atom_id}"

    def neighbors(self, atom_id: int) -> List[int]:
        """Vecinos en orden de inserción (puede haber repetidos)."""
        return list(self._adj.get(atom_id, []))

    def is_carbon(self, atom_id: int) -> bool:
        atom = self.atom(atom_id)
        return atom is not None and atom.is_carbon

    def carbon_atoms(self) -> List[int]:
        return [atom_id for atom_id in self._adj if self.is_carbon(atom_id)]

    def carboxyl_atoms(self) -> List[int]:
        return [
            atom_id
            for atom_id in self._adj
            if atom_id in self.graph.atoms and self.graph.atoms[atom_id].is_carboxyl
        ]

    def ignored_atoms(self) -> Set[int]:
        """Átomos que no son de carbono y nunca extienden la cadena."""
        return {atom_id for atom_id in self._adj if not self.is_carbon(atom_id)}

    def halogen_symbols(self, atom_id: int) -> List[str]:
        atom = self.atom(atom_id)
        return list(atom.halogens) if atom is not None else []

    def halogen_count(self, atom_id: int) -> int:
        atom = self.atom(atom_id)
        return atom.cx_bonds if atom is not None else 0

    def is_acyclic(self) -> bool:
        """Determina si el grafo es acíclico buscando aristas de retroceso.

        Returns:
            `True` si no se detectan ciclos, `False` en caso contrario.
        """
        visited: Set[int] = set()
        for start in self.atoms():
            if start in visited:
                continue
            stack: List[Tuple[int, Optional[int]]] = [(start, None)]
            while stack:
                node, parent = stack.pop()
                if node in visited:
                    return False
                visited.add(node)
                parent_seen = False
                for nbr in self.neighbors(node):
                    if nbr == parent and not parent_seen:
                        # Solo la primera arista hacia el padre es la de llegada.
                        parent_seen = True
                        continue
                    if nbr in visited:
                        return False
                    stack.append((nbr, node))
        return True
