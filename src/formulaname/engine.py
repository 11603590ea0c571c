from __future__ import annotations

import logging

from core.model import FormulaGraph
from formulaio.condensed import parse_formula, split_ether

from .errors import ChemNameInternalError, ChemNameNotSupported
from .locants import choose_orientation, substituents_on_chain
from .options import NameOptions
from .parent_chain import longest_carbon_chain, longest_carboxyl_chain
from .render import render_name
from .rings import ensure_acyclic
from .substituents import ACID_SUFFIX, NameSuffix, branches_on_chain, parent_name

logger = logging.getLogger(__name__)

NOT_AVAILABLE = "N/D"


def iupac_name(formula: str, opts: NameOptions = NameOptions()) -> str:
    """Public entry point: name a condensed formula or a two-fragment ether."""
    try:
        return iupac_name_lite(formula, opts)
    except ChemNameNotSupported as exc:
        logger.info("Cannot name %r: %s", formula, exc)
        if opts.return_nd_on_fail:
            return NOT_AVAILABLE
        raise
    except Exception as exc:  # pragma: no cover
        logger.exception("Internal error naming %r", formula)
        if opts.return_nd_on_fail:
            return NOT_AVAILABLE
        raise ChemNameInternalError(str(exc)) from exc


def iupac_name_lite(formula: str, opts: NameOptions) -> str:
    if opts.max_formula_length is not None and len(formula) > opts.max_formula_length:
        raise ChemNameNotSupported("Formula too long")

    fragments = split_ether(formula, opts.ether_delimiter)
    if fragments is None:
        return name_fragment(formula)

    logger.debug("Ether fragments: %s %s", fragments[0], fragments[1])
    name1 = name_fragment(fragments[0], ether_fragment=True)
    name2 = name_fragment(fragments[1], ether_fragment=True)
    return ether_name(name1, name2)


def name_fragment(formula: str, ether_fragment: bool = False) -> str:
    return name_graph(parse_formula(formula), ether_fragment=ether_fragment)


def name_graph(graph: FormulaGraph, ether_fragment: bool = False) -> str:
    """Name one parsed fragment.

    Raises:
        CyclicFormulaError: If the ring heuristic fires or a cycle exists.
    """
    for line in graph.describe():
        logger.debug(line)

    view = ensure_acyclic(graph)
    if not view.carbon_atoms():
        logger.debug("No carbon atoms found in the input")
        return ""

    carboxyl = bool(view.carboxyl_atoms())
    if carboxyl:
        chain = longest_carboxyl_chain(view)
    else:
        chain = longest_carbon_chain(view)

    branches = branches_on_chain(view, chain)
    chain = choose_orientation(chain, branches, anchored=carboxyl)
    logger.debug("Longest carbon chain: %s", " ".join(view.key(atom_id) for atom_id in chain))

    if ether_fragment:
        suffix = NameSuffix.YL
    elif carboxyl:
        suffix = NameSuffix.AN
    else:
        suffix = NameSuffix.ANE

    name = render_name(substituents_on_chain(chain, branches), parent_name(len(chain), suffix))
    if carboxyl:
        name += ACID_SUFFIX
    logger.debug("IUPAC name: %s", name)
    return name


def ether_name(name1: str, name2: str) -> str:
    """Join two fragment names, smaller first by plain string comparison."""
    if name1 > name2:
        name1, name2 = name2, name1
    return f"{name1} {name2} ether"
