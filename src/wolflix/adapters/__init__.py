"""Concrete implementations of the ports in `wolflix.interfaces`."""
