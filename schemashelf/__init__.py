"""
schemashelf: a schema-registry client with example scripts, and a small
book library service that publishes its API description to the registry.
"""

__version__ = "1.0.0"
