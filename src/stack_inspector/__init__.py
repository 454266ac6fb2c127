"""Stack Inspector: repository dependency inventory and technology detection.

Scans .NET project files, flattens direct and transitive package references
into a catalog, and classifies it against known technology signatures.
"""

__version__ = "0.1.0"
