"""Import classes and definitions used for input/output and diagnostics."""

from .logging import SequenceDiagnostics as SequenceDiagnostics
from .logging import console as console
