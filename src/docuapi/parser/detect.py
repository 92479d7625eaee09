"""Pick a decoder for an API document."""

from pathlib import Path

YAML_SUFFIXES = (".yaml", ".yml")


def detect_format(file_path: Path) -> str:
    """Detect the decoder to use for a document from its file extension.

    Returns: 'yaml' for .yaml/.yml files, 'json' for anything else.
    """
    if file_path.suffix.lower() in YAML_SUFFIXES:
        return "yaml"
    return "json"
