from pathlib import Path
from typing import Dict, Optional

import pytest
from git import Actor, Repo
from git.objects import Commit

AUTHOR = Actor("Test Author", "author@example.com")
BASE_EPOCH = 1_700_000_000


class RepoBuilder:
    """Builds commits with fixed timestamps in a throwaway repository."""

    def __init__(self, path: Path):
        self.path = path
        self.repo = Repo.init(path)
        self._clock = BASE_EPOCH

    def commit(
        self,
        files: Dict[str, Optional[str]],
        message: str = "change",
        when: Optional[int] = None,
    ) -> Commit:
        """Write (or delete, when content is None) files and commit them."""
        for rel_path, content in files.items():
            full_path = self.path / rel_path
            if content is None:
                self.repo.index.remove([rel_path], working_tree=True)
            else:
                full_path.parent.mkdir(parents=True, exist_ok=True)
                full_path.write_text(content, encoding="utf-8")
                self.repo.index.add([rel_path])

        if when is None:
            self._clock += 60
            when = self._clock
        date = f"{when} +0000"
        return self.repo.index.commit(
            message,
            author=AUTHOR,
            committer=AUTHOR,
            author_date=date,
            commit_date=date,
        )

    def close(self) -> None:
        self.repo.close()


@pytest.fixture
def repo_builder(tmp_path: Path):
    builder = RepoBuilder(tmp_path / "source")
    yield builder
    builder.close()


@pytest.fixture
def scenario_repo(repo_builder: RepoBuilder):
    """Commit A adds src/a.go; commit B adds src/b.go, drops src/a.go, edits README."""
    first = repo_builder.commit(
        {
            "README.md": "# Widget\n",
            "src/a.go": "package src\n",
            "docs/guide.md": "Guide\n",
        },
        message="A",
    )
    second = repo_builder.commit(
        {
            "README.md": "# Widget\n\nNow with b.go\n",
            "src/b.go": "package src\n\nfunc B() {}\n",
            "src/a.go": None,
        },
        message="B",
    )
    return repo_builder, first, second
