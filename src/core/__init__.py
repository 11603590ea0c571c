"""API pública del núcleo del namer de fórmulas condensadas.

Reexpone las clases base del modelo para facilitar importaciones.
"""

from core.model import Bond, FormulaAtom, FormulaGraph

__all__ = ["Bond", "FormulaAtom", "FormulaGraph"]
