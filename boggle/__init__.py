"""Boggle: constrained board generation, adjacency word search and dictionary lookups."""
