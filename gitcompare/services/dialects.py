"""Host URL dialects for GitHub, Azure DevOps and GitLab repository links."""

from datetime import datetime
from typing import Optional, Sequence

from ..exceptions import UnsupportedURI, UnsupportedURLStructure
from ..models import CloneTarget, RefKind, RepositoryURI
from ..protocols import HostDialectProtocol


def _strip_git_suffix(name: str) -> str:
    return name[: -len(".git")] if name.endswith(".git") else name


class GitHubDialect:
    """GitHub tree (branch) and releases/tag URLs."""

    name = "github"
    hosts = ("github.com",)

    def matches(self, uri: RepositoryURI) -> bool:
        if uri.host not in self.hosts:
            return False
        segments = uri.segments
        if len(segments) >= 4 and segments[2] == "tree":
            return True
        return len(segments) >= 5 and segments[2:4] == ["releases", "tag"]

    def resolve(self, uri: RepositoryURI) -> CloneTarget:
        segments = uri.segments
        owner, repo = segments[0], _strip_git_suffix(segments[1])
        if uri.use_ssh:
            clone_url = f"git@github.com:{owner}/{repo}.git"
        else:
            clone_url = f"https://github.com/{owner}/{repo}.git"

        if segments[2] == "tree":
            return CloneTarget(
                clone_url=clone_url,
                ref_kind=RefKind.BRANCH,
                ref_name=segments[3],
                use_ssh=uri.use_ssh,
            )
        return CloneTarget(
            clone_url=clone_url,
            ref_kind=RefKind.TAG,
            ref_name=segments[4],
            use_ssh=uri.use_ssh,
        )


class AzureDevOpsDialect:
    """
    Azure DevOps repository URLs.

    HTTPS: https://dev.azure.com/{org}/{project}/_git/{repo}?version=GB{branch}
    SSH:   git@ssh.dev.azure.com:v3/{org}/{project}/{repo}?version=GT{tag}
    """

    name = "azure-devops"
    https_host = "dev.azure.com"
    ssh_host = "ssh.dev.azure.com"

    def matches(self, uri: RepositoryURI) -> bool:
        return uri.host in (self.https_host, self.ssh_host)

    def resolve(self, uri: RepositoryURI) -> CloneTarget:
        segments = uri.segments
        if uri.host == self.https_host:
            if len(segments) < 4 or segments[2] != "_git":
                raise UnsupportedURLStructure(
                    f"Invalid Azure DevOps HTTPS URL structure: {uri.raw}"
                )
            organization, project, repo = segments[0], segments[1], segments[3]
            clone_url = f"https://dev.azure.com/{organization}/{project}/_git/{repo}"
            use_ssh = False
        else:
            if segments and segments[0] == "v3":
                segments = segments[1:]
            if len(segments) < 3:
                raise UnsupportedURLStructure(
                    f"Invalid Azure DevOps SSH URL structure: {uri.raw}"
                )
            organization, project, repo = segments[0], segments[1], segments[2]
            clone_url = f"git@ssh.dev.azure.com:v3/{organization}/{project}/{repo}"
            use_ssh = True

        ref_kind: Optional[RefKind] = None
        ref_name: Optional[str] = None
        version = uri.query_value("version") or ""
        if version.startswith("GB") and len(version) > 2:
            ref_kind, ref_name = RefKind.BRANCH, version[2:]
        elif version.startswith("GT") and len(version) > 2:
            ref_kind, ref_name = RefKind.TAG, version[2:]

        return CloneTarget(
            clone_url=clone_url, ref_kind=ref_kind, ref_name=ref_name, use_ssh=use_ssh
        )


class GitLabDialect:
    """
    GitLab project URLs with an optional `ref` query parameter.

    GitLab does not say whether `ref` is a branch or a tag, so the target
    asks for a branch checkout with a tag fallback.
    """

    name = "gitlab"
    hosts = ("gitlab.com", "ssh.gitlab.com")

    def matches(self, uri: RepositoryURI) -> bool:
        return uri.host in self.hosts

    def resolve(self, uri: RepositoryURI) -> CloneTarget:
        segments = uri.segments
        # Web URLs carry extra routes after "/-/", e.g. /group/project/-/tree/main
        if "-" in segments:
            segments = segments[: segments.index("-")]
        if len(segments) < 2:
            transport = "SSH" if uri.use_ssh else "HTTPS"
            raise UnsupportedURLStructure(
                f"Invalid GitLab {transport} URL structure: {uri.raw}"
            )

        namespace = "/".join(segments[:-1])
        project = _strip_git_suffix(segments[-1])
        use_ssh = uri.use_ssh or uri.host == "ssh.gitlab.com"
        if use_ssh:
            clone_url = f"git@gitlab.com:{namespace}/{project}.git"
        else:
            clone_url = f"https://gitlab.com/{namespace}/{project}.git"

        ref = uri.query_value("ref")
        return CloneTarget(
            clone_url=clone_url,
            ref_kind=RefKind.BRANCH_OR_TAG if ref else None,
            ref_name=ref or None,
            use_ssh=use_ssh,
        )


class PlainDialect:
    """Any other repository URI, cloned as given on its default branch."""

    name = "plain"

    def matches(self, uri: RepositoryURI) -> bool:
        return True

    def resolve(self, uri: RepositoryURI) -> CloneTarget:
        return CloneTarget(clone_url=uri.raw, use_ssh=uri.use_ssh)


DEFAULT_DIALECTS: Sequence[HostDialectProtocol] = (
    GitHubDialect(),
    AzureDevOpsDialect(),
    GitLabDialect(),
    PlainDialect(),
)


def select_dialect(
    uri: RepositoryURI, dialects: Sequence[HostDialectProtocol] = DEFAULT_DIALECTS
) -> HostDialectProtocol:
    for dialect in dialects:
        if dialect.matches(uri):
            return dialect
    raise UnsupportedURI(f"Unsupported Git repository URI format: {uri.raw}")


def resolve_clone_target(
    uri: str, dialects: Sequence[HostDialectProtocol] = DEFAULT_DIALECTS
) -> CloneTarget:
    """
    Resolve a repository URI into a clone target.

    Args:
        uri: Repository URI as given on the command line
        dialects: Dialects to try in order; the first match wins

    Returns:
        The clone URL plus the branch or tag to check out, if any

    Raises:
        InvalidURL: If the URI cannot be parsed
        UnsupportedURI: If the URI scheme cannot be cloned
        UnsupportedURLStructure: If a known host's path has an unexpected shape
    """
    parsed = RepositoryURI.parse(uri)
    return select_dialect(parsed, dialects).resolve(parsed)


def default_target_dir(clone_url: str, now: Optional[datetime] = None) -> str:
    """Directory name for a clone: the repo name, or a timestamped fallback."""
    path = RepositoryURI.parse(clone_url).parts.path
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) >= 2:
        name = _strip_git_suffix(segments[-1])
        if name:
            return name
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return f"cloned-repo-{stamp}"
