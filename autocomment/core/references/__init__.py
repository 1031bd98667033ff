from autocomment.core.references.extractor import (
    extract_issue_key,
    issue_key_pattern,
)

__all__ = ["extract_issue_key", "issue_key_pattern"]
