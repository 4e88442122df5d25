"""Request builders and response parsers for the external collaborators."""
