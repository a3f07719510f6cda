"""Adapters implementing the testscaffold ports."""
