import argparse
import logging
import sys

from formulaio.condensed import split_ether

from .engine import NOT_AVAILABLE, iupac_name
from .options import NameOptions

logger = logging.getLogger(__name__)

PROMPT = "ENTER THE MOLECULAR FORMULA: "


def configure_logging(args):
    """Configure Python logging based on CLI arguments."""
    log_level = "DEBUG" if args.debug else args.log_level
    logging.basicConfig(
        level=getattr(logging, log_level),
        format="%(levelname)s - %(name)s - %(message)s",
    )


def print_smiles(formula, opts):
    """Print the RDKit SMILES of each fragment of the formula."""
    from formulaio.rdkit_io import formula_to_smiles

    fragments = split_ether(formula, opts.ether_delimiter) or (formula,)
    for fragment in fragments:
        try:
            print(f"SMILES: {formula_to_smiles(fragment)}")
        except (RuntimeError, ValueError) as exc:
            logger.error("Cannot export %r to SMILES: %s", fragment, exc)


def main(argv=None):
    p = argparse.ArgumentParser(description="Name a condensed molecular formula (IUPAC-lite).")
    p.add_argument("formula", nargs="?",
                   help="Condensed formula, e.g. CH3CH2CH(CH3)CH3 or CH3-O-CH2CH3 (prompted if omitted)")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], default="WARNING",
                   help="Set logging level (default: WARNING)")
    p.add_argument("-d", "--debug", action="store_true",
                   help="Enable debug output (atom info, edges, principal chain)")
    p.add_argument("--strict", action="store_true",
                   help="Raise on unsupported structures instead of printing N/D")
    p.add_argument("--smiles", action="store_true",
                   help="Also print the SMILES of each fragment (requires RDKit)")
    args = p.parse_args(argv)

    configure_logging(args)

    formula = args.formula
    if formula is None:
        formula = input(PROMPT)
    formula = formula.strip()

    opts = NameOptions(return_nd_on_fail=not args.strict)
    name = iupac_name(formula, opts)
    print(f"IUPAC NAME: {name}")

    if args.smiles:
        print_smiles(formula, opts)

    return 1 if name == NOT_AVAILABLE else 0


if __name__ == "__main__":
    sys.exit(main())
