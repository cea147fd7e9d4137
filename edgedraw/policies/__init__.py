"""Auto-discovery of gradient policy modules.

Every .py file in this package that defines a `policy` object is
auto-registered by edgedraw.registry.discover(). The policy's `method`
number is the value accepted by --method and EDGEDRAW_METHOD.
"""
