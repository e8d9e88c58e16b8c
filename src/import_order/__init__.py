"""
import-order Package.

Checks that the import declarations of a source file are grouped, sorted and
separated according to a configurable policy, and optionally suggests the
desired import block.

Usage
-----

Checking a Java file
^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from import_order import ImportOrderConfig, check_source

    config = ImportOrderConfig(groups=["java", "javax", "*"], separated=True)
    for d in check_source(java_text, config):
        print(d.line, d.message)

Driving the engine from your own walker
^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^^

.. code-block:: python

    from import_order import ImportOrderEngine

    engine = ImportOrderEngine(config, sink=lambda line, key, args: ...)
    engine.begin_file()
    engine.on_import("java.util.List", 3, is_static=False)
    engine.on_import("java.lang.Math.PI", 4, is_static=True)
    engine.end_file()
"""

from import_order.config import ImportOrderConfig
from import_order.core.classifier import GroupClassifier, InvalidGroupError
from import_order.core.engine import ImportOrderEngine, check_imports
from import_order.core.records import Diagnostic, ImportRecord, Violation
from import_order.core.scanner import check_source, scan_imports
from import_order.enums import StaticImportPolicy, ViolationKind

__version__ = "0.1.0"

__all__ = [
  "Diagnostic",
  "GroupClassifier",
  "ImportOrderConfig",
  "ImportOrderEngine",
  "ImportRecord",
  "InvalidGroupError",
  "StaticImportPolicy",
  "Violation",
  "ViolationKind",
  "__version__",
  "check_imports",
  "check_source",
  "scan_imports",
]
