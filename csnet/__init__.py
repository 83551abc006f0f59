"""SCION ISD-AS identifiers, hop and info fields, path segments, path collections and topology bootstrapping."""

__version__ = "0.1.0"

__all__ = ["isd_as", "hop_field", "info_field", "segment", "path_collection", "bootstrapper"]