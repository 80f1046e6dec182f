"""Immich Importer Bootstrap - installs and launches the Google Photos importer."""

from config.project import get_project

__version__ = get_project().version

# No package-level imports - use absolute imports instead
