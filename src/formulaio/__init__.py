"""Entrada y salida de fórmulas: lectura condensada y exportación RDKit."""

from .condensed import ETHER_DELIMITER, parse_formula, split_ether

__all__ = ["ETHER_DELIMITER", "parse_formula", "split_ether"]
