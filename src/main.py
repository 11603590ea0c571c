"""Punto de entrada del namer de fórmulas condensadas.

Permite ejecutar la CLI directamente desde el árbol de código fuente
(`python src/main.py CH3CH2CH3`) sin instalar el paquete.
"""

import sys
import os

# Aseguramos que Python encuentre los módulos dentro de `src` al ejecutar
# el archivo directamente.
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from formulaname.cli import main

if __name__ == "__main__":
    sys.exit(main())
