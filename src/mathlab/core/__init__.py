"""
Core constants, configuration, errors and scalar numeric functions.

This package has no dependencies on the vector broadcast layer: data flows
constants → scalar core → vector layer.
"""
