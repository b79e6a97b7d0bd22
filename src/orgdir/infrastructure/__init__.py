"""Infrastructure layer — in-memory registries, the Organization aggregate, roster codec.

Infrastructure may import from domain. It must never import from
services, commands, or output.
"""
