"""Shared constants for sfident."""

# Identifier delimiter; doubled inside a quoted segment to mean itself.
QUOTE: str = '"'
ESCAPED_QUOTE: str = QUOTE * 2

# Level separator outside of quoted segments
SEPARATOR: str = "."

# Namespace levels, outermost first
LEVELS: tuple[str, ...] = ("database", "schema", "table", "column")
MAX_DEPTH: int = len(LEVELS)

# Database role external ids
DATABASE_ROLE_PREFIX: str = "DATABASEROLE###DATABASE:"
DATABASE_ROLE_DIVIDER: str = "###ROLE:"

# Config file lookup, first match wins
CONFIG_FILENAMES: tuple[str, ...] = ("sfident.yaml", "sfident.yml")
