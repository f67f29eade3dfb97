"""Two-stack sorting with a restricted instruction set, and a checker for it."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "algorithm", "cli", "checker"]