"""Motor de nomenclatura IUPAC-lite para fórmulas condensadas.

Soporta (v0) un subconjunto de moléculas saturadas escritas en forma lineal:
- Cadenas acíclicas con ramas alquilo lineales (hasta butilo).
- Halógenos (cloro, bromo, flúor, yodo) sobre la cadena principal.
- Un ácido carboxílico (`COOH`) que ancla la cadena en el locante 1.
- Éteres simples de dos fragmentos separados por `-O-`.

Los fragmentos que la heurística considera cíclicos devuelven "N/D" si
está habilitada la opción.
"""

from .engine import iupac_name, name_fragment, name_graph
from .options import NameOptions

__all__ = ["iupac_name", "name_fragment", "name_graph", "NameOptions"]
