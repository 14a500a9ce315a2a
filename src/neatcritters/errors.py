"""
Errors Module

The two failure kinds raised by the genome core. Both derive from ValueError,
so callers that already guard reproduction with 'except ValueError' keep working.

Classes:
    StructuralError:    A graph is not a DAG, breaks the node-role rules, or
                        references an undefined node key
    ConfigurationError: A probability or deviation is missing or out of range
"""

class StructuralError(ValueError):
    """
    Raised when an operation would produce, or receives, a malformed genome graph.
    """

class ConfigurationError(ValueError):
    """
    Raised when the configuration is missing a value or holds an out-of-range one.
    """
