from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class PullRequest:
    url: str
    repository_full_name: str
    title: str
    description: Optional[str]
    created_at: str
    author_login: str
