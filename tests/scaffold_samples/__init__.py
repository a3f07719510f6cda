"""Sample modules inspected by the scaffold tests."""
