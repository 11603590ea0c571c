"""Opciones de configuración para el motor de nombres IUPAC-lite."""

from dataclasses import dataclass
from typing import Optional

from formulaio.condensed import ETHER_DELIMITER


@dataclass
class NameOptions:
    """Opciones de control del algoritmo de nomenclatura."""

    # Si falla el soporte, devolver "N/D" en lugar de lanzar excepción.
    return_nd_on_fail: bool = True
    # Marcador que separa los dos fragmentos de un éter.
    ether_delimiter: str = ETHER_DELIMITER
    # Longitud máxima aceptada; la búsqueda de cadena es exponencial en
    # el peor caso. `None` desactiva el límite.
    max_formula_length: Optional[int] = 512
