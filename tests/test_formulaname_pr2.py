import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from formulaio.condensed import parse_formula
from formulaname.molview import MolView
from formulaname.parent_chain import (
    longest_carbon_chain,
    longest_carboxyl_chain,
    longest_path_from,
)


def is_valid_chain(view: MolView, chain: list[int]) -> bool:
    for i in range(len(chain) - 1):
        if chain[i + 1] not in view.neighbors(chain[i]):
            return False
    return len(set(chain)) == len(chain)


class ChemNamePR2Test(unittest.TestCase):
    def test_longest_chain_dodecane(self):
        view = MolView(parse_formula("C" * 12))
        chain = longest_carbon_chain(view)
        self.assertEqual(len(chain), 12)
        self.assertTrue(is_valid_chain(view, chain))

    def test_longest_chain_branch(self):
        view = MolView(parse_formula("CH3CH(CH2CH3)CH2CH3"))
        chain = longest_carbon_chain(view)
        self.assertEqual(chain, [4, 3, 2, 5, 6])
        self.assertTrue(is_valid_chain(view, chain))

    def test_path_ties_keep_first_neighbor(self):
        view = MolView(parse_formula("CH3CH(CH3)CH3"))
        self.assertEqual(longest_path_from(view, 1), [1, 2, 3])

    def test_path_backtracks_into_later_branches(self):
        view = MolView(parse_formula("CH3CH(CH3)CH2CH2CH3"))
        self.assertEqual(longest_path_from(view, 3), [3, 2, 4, 5, 6])

    def test_foreign_atoms_never_join_the_chain(self):
        view = MolView(parse_formula("CH3CH2NCH2CH2CH3"))
        chain = longest_carbon_chain(view)
        self.assertNotIn(3, chain)
        self.assertEqual(chain, [2, 1])

    def test_no_carbon_gives_empty_chain(self):
        view = MolView(parse_formula("NO"))
        self.assertEqual(longest_carbon_chain(view), [])

    def test_carboxyl_chain_starts_at_carboxyl(self):
        view = MolView(parse_formula("CH3CH2COOH"))
        self.assertEqual(longest_carboxyl_chain(view), [3, 2, 1])

    def test_carboxyl_chain_prefers_longest_anchor(self):
        view = MolView(parse_formula("COOHCH2COOH"))
        self.assertEqual(longest_carboxyl_chain(view), [1, 2, 3])

    def test_carboxyl_chain_ignores_longer_unanchored_path(self):
        # La cadena más larga (cinco carbonos) no contiene el carboxilo.
        view = MolView(parse_formula("CH3CH2CH(COOH)CH2CH3"))
        self.assertEqual(longest_carboxyl_chain(view), [4, 3, 2, 1])
        self.assertEqual(len(longest_carbon_chain(view)), 5)


if __name__ == "__main__":
    unittest.main()
