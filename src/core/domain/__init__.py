"""Domain models and errors.

Pure data structures (Pydantic v2) and the error taxonomy. The domain knows
nothing about sockets, terminals or the CLI.
"""
