"""SolReclaim: estimate SOL rent locked in empty token accounts."""

__version__ = "1.0.0"
