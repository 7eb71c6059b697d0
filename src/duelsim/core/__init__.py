"""Core helpers shared by the domain and service layers."""
