"""Domain models and errors for testscaffold."""
