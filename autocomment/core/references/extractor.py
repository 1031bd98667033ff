import re
from typing import Optional, Pattern

# [KEY-123](https://tracker.domain/any/path)
_LINK_TEMPLATE = r"\[(\w+-\d+)\]\(https://{domain}(?:/[^\s)]*)?\)"


def issue_key_pattern(tracker_domain: str) -> Pattern[str]:
    return re.compile(_LINK_TEMPLATE.format(domain=re.escape(tracker_domain)))


def extract_issue_key(text: str, tracker_domain: str) -> Optional[str]:
    if not text or not tracker_domain:
        return None
    match = issue_key_pattern(tracker_domain).search(text)
    if match is None:
        return None
    return match.group(1)
