import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from formulaio.condensed import parse_formula, split_ether


def labels(graph):
    return [atom.label for atom in graph.atoms.values()]


class CondensedParserTest(unittest.TestCase):
    def test_bare_carbons(self):
        graph = parse_formula("CCCC")
        self.assertEqual(labels(graph), ["C", "C", "C", "C"])
        self.assertEqual(graph.edges(), [(1, 2), (2, 3), (3, 4)])
        self.assertIsNone(graph.get_atom(1).explicit_h)

    def test_hydrogen_and_trailing_halogen(self):
        graph = parse_formula("CH3CH2Cl")
        self.assertEqual(labels(graph), ["C", "C"])
        self.assertEqual(graph.get_atom(1).explicit_h, 3)
        second = graph.get_atom(2)
        self.assertEqual(second.explicit_h, 2)
        self.assertEqual(second.cx_bonds, 1)
        self.assertEqual(second.halogens, ["Cl"])
        self.assertEqual(graph.edges(), [(1, 2)])

    def test_hydrogen_without_digit_defaults_to_one(self):
        graph = parse_formula("CHF")
        atom = graph.get_atom(1)
        self.assertEqual(atom.explicit_h, 1)
        self.assertEqual(atom.halogens, ["F"])

    def test_parenthesized_chlorine_is_not_carbon(self):
        graph = parse_formula("CH3CH2CH(Cl)CH3")
        self.assertEqual(labels(graph), ["C", "C", "C", "C"])
        self.assertEqual(graph.get_atom(3).halogens, ["Cl"])
        self.assertEqual(graph.get_atom(3).explicit_h, 1)
        self.assertEqual(graph.edges(), [(1, 2), (2, 3), (3, 4)])

    def test_branch_returns_to_attachment_point(self):
        graph = parse_formula("CH3CH(CH3)CH3")
        self.assertEqual(graph.edges(), [(1, 2), (2, 3), (2, 4)])
        self.assertEqual(graph.get_atom(2).cc_bonds, 3)

    def test_nested_branches(self):
        graph = parse_formula("CH3C(CH(CH3)CH3)HCH3")
        # C2 lleva la rama C3(C4)C5; H tras ")" es un átomo de respaldo.
        self.assertIn((2, 3), graph.edges())
        self.assertIn((3, 4), graph.edges())
        self.assertIn((3, 5), graph.edges())

    def test_carboxyl_group(self):
        graph = parse_formula("COOHCH2CH3")
        self.assertEqual(labels(graph), ["COOH", "C", "C"])
        self.assertTrue(graph.get_atom(1).is_carboxyl)
        self.assertEqual(graph.get_atom(1).cc_bonds, 1)

    def test_unmatched_close_is_ignored(self):
        graph = parse_formula("CH3)CH3")
        self.assertEqual(graph.edges(), [(1, 2)])

    def test_unknown_symbol_becomes_fallback_atom(self):
        graph = parse_formula("CH3NCH3")
        self.assertEqual(labels(graph), ["C", "N", "C"])
        self.assertEqual(graph.edges(), [(1, 2), (2, 3)])
        self.assertEqual(graph.get_atom(1).cc_bonds, 0)

    def test_two_letter_fallback_symbol(self):
        graph = parse_formula("CH3Na")
        self.assertEqual(labels(graph), ["C", "Na"])

    def test_halogen_without_previous_atom_is_noop(self):
        graph = parse_formula("BrCH3")
        self.assertEqual(labels(graph), ["C"])
        self.assertEqual(graph.get_atom(1).cx_bonds, 0)

    def test_junk_characters_are_skipped(self):
        graph = parse_formula("C C#C 2")
        self.assertEqual(labels(graph), ["C", "C", "C"])
        self.assertEqual(graph.edges(), [(1, 2), (2, 3)])

    def test_empty_formula(self):
        graph = parse_formula("")
        self.assertEqual(graph.atoms, {})

    def test_split_ether(self):
        self.assertEqual(split_ether("CH3-O-CH2CH3"), ("CH3", "CH2CH3"))
        self.assertIsNone(split_ether("CH3CH3"))
        self.assertEqual(split_ether("CH3|CH3", delimiter="|"), ("CH3", "CH3"))


if __name__ == "__main__":
    unittest.main()
