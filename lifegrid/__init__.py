"""Life-like cellular automata: boards, switchable rule sets and an interactive viewer."""

__version__ = "0.1.0"