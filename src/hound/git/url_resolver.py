"""URL resolver for repository file links."""

import re

from hound.core.exceptions import ConfigurationError
from hound.core.models.repository import Repository


class URLResolver:
    """Resolves (path, line) to a browsable URL for a repository.

    Expands the repository's URL pattern: ``anchor`` gets ``{line}``,
    then ``base-url`` gets ``{url}``, ``{path}`` and ``{anchor}``. The
    repository must have been normalized first.
    """

    def __init__(self, repo: Repository) -> None:
        if repo.url_pattern is None:
            raise ConfigurationError(
                "Repository has no url-pattern",
                details={"url": repo.url},
            )
        self._repo = repo
        self._pattern = repo.url_pattern

    def resolve(self, path: str, line: int | None = None) -> str:
        """Resolve a file path and optional line number to a URL."""
        anchor = ""
        if line is not None:
            anchor = self._expand(self._pattern.anchor, line=str(line))
        return self._expand(
            self._pattern.base_url,
            url=self._normalize_remote_url(self._repo.url),
            path=path.lstrip("/"),
            anchor=anchor,
        )

    @staticmethod
    def _expand(template: str, **values: str) -> str:
        """Substitute ``{name}`` placeholders, leaving unknown ones alone."""
        result = template
        for name, value in values.items():
            result = result.replace("{" + name + "}", value)
        return result

    @staticmethod
    def _normalize_remote_url(url: str) -> str:
        """Normalize a git remote URL to an HTTPS base URL.

        Handles:
        - git@github.com:org/repo.git -> https://github.com/org/repo
        - https://github.com/org/repo.git -> https://github.com/org/repo
        """
        url = re.sub(r"\.git$", "", url)
        ssh_match = re.match(r"git@([^:]+):(.+)", url)
        if ssh_match:
            host, path = ssh_match.groups()
            return f"https://{host}/{path}"
        return url
