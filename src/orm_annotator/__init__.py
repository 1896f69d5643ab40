"""orm-annotator: generated docblocks for ORM data-model classes.

Keeps a marker-bounded comment block above each entity and extension
class declaration so IDEs can autocomplete fields and relations that only
exist in the ORM schema.
"""

__version__ = "0.1.0"
