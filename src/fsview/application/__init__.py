"""Application layer: operations over views and reporters."""
