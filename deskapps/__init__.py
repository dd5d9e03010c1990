"""Menu-driven console applications for bank accounts, library lending, car parking, employees and tasks."""

__version__ = "0.1.0"