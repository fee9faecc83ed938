"""Cost structures, state and output managers, exhaustive enumeration, text-menu testers and compiled expression nodes for local search solvers."""

__version__ = "0.1.0"
__all__ = [
    "coststructure",
    "outputmanager",
    "enumeration",
    "statemanager",
    "componenttester",
    "kickertester",
    "tester",
    "compiledexpression",
]