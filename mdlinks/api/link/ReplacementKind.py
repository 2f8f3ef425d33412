"""Replacement kind constants."""

NORMALIZED_REL = "normalizedRel"
# Reserved: full docs-folder normalization is never emitted
NORMALIZED_FULL = "normalizedFull"
PATH_SUBSTITUTION = "pathSubstitution"
PATCHED = "patched"
UPDATED = "updated"

# Kinds whose application makes process_file_replacement persist the file
WRITE_TRIGGER_KINDS = (NORMALIZED_FULL, PATCHED, PATH_SUBSTITUTION, NORMALIZED_REL)
