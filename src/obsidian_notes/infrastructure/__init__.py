"""Low-level helpers: frontmatter, configuration, logging."""
