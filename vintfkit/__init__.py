"""Data model for vendor interface manifests and compatibility matrices."""

__version__ = "0.1.0"

__all__ = ["enums", "version", "transport_arch", "flags", "sdk", "xml_file", "hal_group"]