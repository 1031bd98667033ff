import requests

API_PREFIX = "rest/api/3"


class JiraClient:
    def __init__(
        self,
        domain: str,
        user: str,
        password: str,
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.domain = domain
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.auth = (user, password)
        self._session.headers.update({"Accept": "application/json"})

    def url(self, endpoint: str) -> str:
        return f"https://{self.domain}/{API_PREFIX}/{endpoint}"

    def get(self, endpoint: str, **kwargs) -> requests.Response:
        return self._session.get(self.url(endpoint), timeout=self._timeout, **kwargs)

    def post(self, endpoint: str, data: str, **kwargs) -> requests.Response:
        return self._session.post(
            self.url(endpoint),
            data=data.encode("utf-8"),
            headers={"Content-Type": "application/json"},
            timeout=self._timeout,
            **kwargs,
        )

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> 'JiraClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:  # noqa: ANN001
        self.close()
