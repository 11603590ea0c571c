from __future__ import annotations

from typing import Dict

from core.model import FormulaGraph

from .condensed import parse_formula

try:
    from rdkit import Chem
except Exception:  # pragma: no cover - optional dependency at runtime
    Chem = None


def _require_rdkit():
    if Chem is None:
        raise RuntimeError("RDKit no disponible")


def _ensure_ring_info(mol) -> None:
    if hasattr(Chem, "FastFindRings"):
        Chem.FastFindRings(mol)
    else:
        Chem.GetSymmSSSR(mol)


def formula_graph_to_rdkit_with_map(graph: FormulaGraph):
    """Build an RDKit molecule; `COOH` expands to C(=O)O, halogens become atoms."""
    _require_rdkit()
    rw = Chem.RWMol()
    id_map: Dict[int, int] = {}

    for atom in sorted(graph.atoms.values(), key=lambda a: a.id):
        symbol = "C" if atom.is_carbon else atom.label
        try:
            rd_atom = Chem.Atom(symbol)
        except Exception as exc:
            raise ValueError(f"Símbolo no reconocido: {atom.label}") from exc
        rd_idx = rw.AddAtom(rd_atom)
        id_map[atom.id] = rd_idx

        if atom.is_carboxyl:
            oxo = rw.AddAtom(Chem.Atom("O"))
            hydroxy = rw.AddAtom(Chem.Atom("O"))
            rw.AddBond(rd_idx, oxo, Chem.BondType.DOUBLE)
            rw.AddBond(rd_idx, hydroxy, Chem.BondType.SINGLE)
        for halogen in atom.halogens:
            hal_idx = rw.AddAtom(Chem.Atom(halogen))
            rw.AddBond(rd_idx, hal_idx, Chem.BondType.SINGLE)

    for bond in graph.bonds.values():
        # Los enlaces duplicados del grafo no existen en RDKit.
        if rw.GetBondBetweenAtoms(id_map[bond.a1_id], id_map[bond.a2_id]) is None:
            rw.AddBond(id_map[bond.a1_id], id_map[bond.a2_id], Chem.BondType.SINGLE)

    mol = rw.GetMol()
    mol.UpdatePropertyCache(strict=False)
    _ensure_ring_info(mol)
    return mol, id_map


def formula_graph_to_rdkit(graph: FormulaGraph):
    mol, _ = formula_graph_to_rdkit_with_map(graph)
    return mol


def formula_graph_to_smiles(graph: FormulaGraph) -> str:
    mol = formula_graph_to_rdkit(graph)
    return Chem.MolToSmiles(mol, canonical=True)


def formula_graph_to_molfile(graph: FormulaGraph) -> str:
    mol = formula_graph_to_rdkit(graph)
    return Chem.MolToMolBlock(mol)


def formula_to_smiles(formula: str) -> str:
    return formula_graph_to_smiles(parse_formula(formula))
