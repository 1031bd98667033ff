from autocomment.core.sync.engine import CommentSync, issue_url, sync_comments

__all__ = ["CommentSync", "issue_url", "sync_comments"]
