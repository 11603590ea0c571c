"""Modelo de datos del grafo de fórmula condensada.

Este módulo concentra las estructuras que representan la fórmula ya
interpretada: átomos etiquetados con sus contadores de enlaces y la lista
ordenada de enlaces. El analizador (`formulaio.condensed`) construye estas
clases y el motor de nombres (`formulaname`) las consulta.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

# Etiquetas que cuentan como nodos de carbono (el carboxilo aporta su C).
CARBON_LABEL = "C"
CARBOXYL_LABEL = "COOH"
CARBON_LABELS = {CARBON_LABEL, CARBOXYL_LABEL}

# Valor de enlaces totales que marca un candidato a cierre de anillo.
RING_CLOSURE_BONDS = 3


@dataclass
class FormulaAtom:
    """Representa un átomo (o grupo) leído de la fórmula."""
    id: int
    label: str = CARBON_LABEL
    cc_bonds: int = 0
    explicit_h: Optional[int] = None
    cx_bonds: int = 0
    halogens: List[str] = field(default_factory=list)

    @property
    def is_carbon(self) -> bool:
        return self.label in CARBON_LABELS

    @property
    def is_carboxyl(self) -> bool:
        return self.label == CARBOXYL_LABEL

    def set_hydrogens(self, count: int) -> None:
        """Fija (no acumula) el número de enlaces C-H."""
        self.explicit_h = count

    def add_halogen(self, symbol: str) -> None:
        """Registra un halógeno unido e incrementa el contador C-X."""
        self.cx_bonds += 1
        self.halogens.append(symbol)

    def total_bonds(self) -> int:
        """Suma de enlaces C-C, C-H y C-X.

        Solo se usa como señal heurística; no se valida contra la valencia
        real del carbono.
        """
        return self.cc_bonds + (self.explicit_h or 0) + self.cx_bonds

    def key(self) -> str:
        """Etiqueta de presentación `label + id` (p. ej., "C3", "COOH1")."""
        return f"{self.label}{self.id}"

    def describe(self) -> str:
        h_count = self.explicit_h or 0
        return f"{self.key()}: C-C={self.cc_bonds}, C-H={h_count}, C-X={self.cx_bonds}"


@dataclass
class Bond:
    """Representa un enlace (par no ordenado) entre dos átomos."""
    id: int
    a1_id: int
    a2_id: int


class FormulaGraph:
    """Grafo de átomos y enlaces construido a partir de una fórmula."""

    def __init__(self) -> None:
        """Inicializa el grafo vacío y contadores internos de IDs."""
        self.atoms: Dict[int, FormulaAtom] = {}
        self.bonds: Dict[int, Bond] = {}
        self.adjacency: Dict[int, List[int]] = {}
        self._next_atom_id = 1
        self._next_bond_id = 1

    def add_atom(self, label: str = CARBON_LABEL) -> FormulaAtom:
        """Crea y registra un átomo en el grafo.

        Args:
            label: Etiqueta del átomo ("C", "COOH" o un símbolo literal).

        Returns:
            El átomo creado, con un ID nuevo que nunca se reutiliza.

        Side Effects:
            Incrementa el contador de IDs y modifica `self.atoms`.
        """
        atom_id = self._next_atom_id
        self._next_atom_id += 1
        atom = FormulaAtom(id=atom_id, label=label)
        self.atoms[atom_id] = atom
        self.adjacency[atom_id] = []
        return atom

    def add_bond(self, a1_id: int, a2_id: int) -> Bond:
        """Crea y registra un enlace entre dos átomos.

        Si ambos extremos son nodos de carbono se incrementa su contador
        C-C. Los duplicados se admiten: cada llamada agrega un enlace nuevo
        y ambas direcciones en la adyacencia.

        Args:
            a1_id: ID del primer átomo.
            a2_id: ID del segundo átomo.

        Returns:
            El enlace creado.

        Side Effects:
            Modifica `self.bonds`, `self.adjacency` y los contadores C-C.
        """
        atom1 = self.atoms[a1_id]
        atom2 = self.atoms[a2_id]
        if atom1.is_carbon and atom2.is_carbon:
            atom1.cc_bonds += 1
            atom2.cc_bonds += 1
        bond_id = self._next_bond_id
        self._next_bond_id += 1
        bond = Bond(id=bond_id, a1_id=a1_id, a2_id=a2_id)
        self.bonds[bond_id] = bond
        self.adjacency.setdefault(a1_id, []).append(a2_id)
        self.adjacency.setdefault(a2_id, []).append(a1_id)
        return bond

    def get_atom(self, atom_id: int) -> FormulaAtom:
        return self.atoms[atom_id]

    def neighbors(self, atom_id: int) -> List[int]:
        return list(self.adjacency.get(atom_id, []))

    def edges(self) -> List[Tuple[int, int]]:
        """Devuelve los enlaces como pares de IDs en orden de creación."""
        return [(bond.a1_id, bond.a2_id) for bond in self.bonds.values()]

    def ring_closure_candidates(self) -> List[int]:
        """IDs (en orden de creación) con exactamente 3 enlaces totales."""
        return [
            atom_id
            for atom_id, atom in self.atoms.items()
            if atom.total_bonds() == RING_CLOSURE_BONDS
        ]

    def describe(self) -> List[str]:
        """Líneas de diagnóstico: información de átomos y lista de enlaces."""
        lines = [atom.describe() for atom in self.atoms.values()]
        for a1_id, a2_id in self.edges():
            lines.append(f"{self.atoms[a1_id].key()}-{self.atoms[a2_id].key()}")
        return lines

    def clear(self) -> None:
        """Elimina todos los átomos y enlaces del grafo.

        Side Effects:
            Limpia `self.atoms`, `self.bonds`, la adyacencia y reinicia
            contadores.
        """
        self.atoms.clear()
        self.bonds.clear()
        self.adjacency.clear()
        self._next_atom_id = 1
        self._next_bond_id = 1
