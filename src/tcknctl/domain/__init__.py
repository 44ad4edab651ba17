"""Domain layer: the TCKN checksum rule and the generate/validate pair.

This layer depends only on stdlib.
It must never import from services, commands, config, or output.
"""
