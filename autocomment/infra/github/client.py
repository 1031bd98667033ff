from github import Auth, Github

DEFAULT_GITHUB_DOMAIN = "api.github.com"


class GitHubClient:
    def __init__(
        self,
        token: str,
        domain: str = DEFAULT_GITHUB_DOMAIN,
        timeout: float = 10,
    ) -> None:
        self._client = Github(
            base_url=f"https://{domain or DEFAULT_GITHUB_DOMAIN}",
            auth=Auth.Token(token),
            timeout=max(1, round(timeout)),
        )

    def get_repo(self, full_name: str):
        return self._client.get_repo(full_name)

    def close(self) -> None:
        try:
            self._client.close()
        except AttributeError:
            return

    def __enter__(self) -> 'GitHubClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
