"""Code generators for the FHEVM example hub.

Three independent tools share this package:

    fhevm-create-example   scaffold a stand-alone example project
    fhevm-generate-docs    build markdown docs from source annotations
    fhevm-create-category  write the learning-category pages
"""

from pathlib import Path
from typing import Callable

__version__ = "0.1.0"

# Called with (label, path) right after each generated file is written
WriteCallback = Callable[[str, Path], None]
