"""Infrastructure layer: adapters to git, markdown-it, filesystem and config files."""
