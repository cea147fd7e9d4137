"""edgedraw.core — Foundation layer.

Contains the grid types, the four pipeline stages (gradient, direction,
suppress, hysteresis), configuration loading and the report builder.
This module has NO dependencies on edgedraw.policies or edgedraw.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
