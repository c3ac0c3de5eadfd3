"""Domain layer: validators, annotated types and protocols.

Structure:
- validators/: validator factories, the predicate chain and the registry
- protocols/: ports implemented by infrastructure (logging)
- types.py: ready-made pydantic Annotated types
"""
