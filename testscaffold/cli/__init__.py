"""Command line interface for testscaffold."""
