"""branchdiff — classify the files that differ between two GitLab branches."""

__version__ = "0.1.0"
