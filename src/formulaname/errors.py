"""Excepciones específicas del motor de nombres de fórmulas condensadas."""


class ChemNameNotSupported(Exception):
    """Se lanza cuando el fragmento queda fuera del alcance soportado."""


class CyclicFormulaError(ChemNameNotSupported):
    """El fragmento se interpretó como cíclico; no se intenta nombrarlo."""


class ChemNameInternalError(Exception):
    """Se lanza ante errores internos inesperados del motor."""
