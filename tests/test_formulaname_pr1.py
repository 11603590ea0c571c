import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from core.model import FormulaGraph
from formulaio.condensed import parse_formula
from formulaname.errors import ChemNameNotSupported, CyclicFormulaError
from formulaname.molview import MolView
from formulaname.rings import close_ring_heuristic, ensure_acyclic


def build_linear_chain(graph: FormulaGraph, length: int) -> list[int]:
    ids = []
    prev_id = None
    for _ in range(length):
        atom = graph.add_atom("C")
        ids.append(atom.id)
        if prev_id is not None:
            graph.add_bond(prev_id, atom.id)
        prev_id = atom.id
    return ids


class ChemNamePR1Test(unittest.TestCase):
    def test_is_acyclic_true(self):
        graph = FormulaGraph()
        build_linear_chain(graph, 3)
        view = MolView(graph)
        self.assertTrue(view.is_acyclic())

    def test_is_acyclic_false(self):
        graph = FormulaGraph()
        a1, a2, a3 = build_linear_chain(graph, 3)
        graph.add_bond(a3, a1)

        view = MolView(graph)
        self.assertFalse(view.is_acyclic())

    def test_view_keeps_parser_ids(self):
        view = MolView(parse_formula("CH3NCH3"))
        self.assertEqual(view.atoms(), [1, 2, 3])
        self.assertEqual(view.ignored_atoms(), {2})
        self.assertEqual(view.carbon_atoms(), [1, 3])
        self.assertEqual(view.key(2), "N2")

    def test_single_atom_fragment_has_a_node(self):
        view = MolView(parse_formula("CH4"))
        self.assertEqual(view.atoms(), [1])
        self.assertEqual(view.neighbors(1), [])

    def test_carboxyl_atoms(self):
        view = MolView(parse_formula("CH3COOH"))
        self.assertEqual(view.carboxyl_atoms(), [2])

    def test_unresolved_atom_defaults(self):
        view = MolView(parse_formula("CH3"))
        self.assertEqual(view.label(99), "")
        self.assertEqual(view.halogen_count(99), 0)
        self.assertFalse(view.is_carbon(99))


class RingHeuristicTest(unittest.TestCase):
    def test_two_candidates_close_a_ring(self):
        graph = parse_formula("CH2CH2CH2")
        self.assertTrue(close_ring_heuristic(graph))
        self.assertEqual(graph.edges()[-1], (1, 3))

    def test_single_candidate_is_not_a_ring(self):
        graph = parse_formula("CH3CH2CH2")
        self.assertFalse(close_ring_heuristic(graph))
        self.assertEqual(len(graph.bonds), 2)

    def test_saturated_chain_is_not_a_ring(self):
        graph = parse_formula("CH3CH2CH3")
        self.assertFalse(close_ring_heuristic(graph))

    def test_ensure_acyclic_raises(self):
        with self.assertRaises(CyclicFormulaError):
            ensure_acyclic(parse_formula("CH2CH2CH2"))

    def test_ensure_acyclic_catches_real_cycle(self):
        graph = FormulaGraph()
        a1, _, a3 = build_linear_chain(graph, 3)
        graph.add_bond(a3, a1)
        with self.assertRaises(ChemNameNotSupported):
            ensure_acyclic(graph)

    def test_ensure_acyclic_returns_view(self):
        view = ensure_acyclic(parse_formula("CH3CH2CH3"))
        self.assertIsInstance(view, MolView)


if __name__ == "__main__":
    unittest.main()
