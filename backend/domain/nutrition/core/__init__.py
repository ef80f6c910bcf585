"""Core model of the nutrition domain."""
