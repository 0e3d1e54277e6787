import logging
from typing import List

from projaudit.config import VcsConfig
from projaudit.types import Findings
from projaudit.vcs import GitStatusQuery, StatusQuery, VcsQueryError

logger = logging.getLogger(__name__)


class UnstagedFileCheck:
    """Lists files whose working tree status is "modified".

    Added, deleted, renamed and untracked files are deliberately ignored.
    Paths are reported as given by the status query, relative to the
    repository.
    """

    target = "unstaged_files"

    def __init__(self, status_query: StatusQuery = None, config: VcsConfig = None):
        self.config = config or VcsConfig()
        self.status_query = status_query or GitStatusQuery(
            executable=self.config.executable,
            timeout=self.config.timeout,
        )

    def run(self, root: str) -> Findings:
        paths: List[str] = []
        try:
            statuses = self.status_query.query_status(root)
        except VcsQueryError as e:
            logger.warning("Could not read version control status for %s: %s", root, e)
            return Findings(target=self.target)

        for status in statuses:
            if status.working_dir == self.config.modified_code:
                paths.append(status.path)
        return Findings(target=self.target, paths=tuple(paths))
