"""Operational scripts for Sounds Like Home."""
