"""Tax policy tables and rate computations."""

from taxgraph.engines.brackets import apply_brackets, federal_brackets, standard_deduction
from taxgraph.engines.fica import FicaPolicy, excess_ss_withholding, fica_policy

__all__ = [
    "FicaPolicy",
    "apply_brackets",
    "excess_ss_withholding",
    "federal_brackets",
    "fica_policy",
    "standard_deduction",
]
