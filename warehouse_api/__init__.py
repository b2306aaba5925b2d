"""Beverage Warehouse API Package — catalog of categories, products and orders.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
