"""
Example scripts driving ``RegistryClient``.

Each module exposes ``main() -> int`` and is installed as a console
script (``schemashelf-basic``, ``schemashelf-artifacts``,
``schemashelf-openapi``, ``schemashelf-search``,
``schemashelf-publish-docs``). They can also be run with
``python -m schemashelf.examples.<name>``.
"""
