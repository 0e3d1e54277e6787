import logging

from projaudit.config import EnvConfig
from projaudit.types import Findings
from projaudit.walker import DirSnapshot

logger = logging.getLogger(__name__)


class EnvExampleCheck:
    """Flags an environment template that has no real env file next to it.

    The result is one boolean for the whole run. Once a directory is flagged
    its subtree is not searched any further; sibling subtrees still are.
    """

    target = "unused_env_example"

    def __init__(self, config: EnvConfig = None):
        self.config = config or EnvConfig()
        self._orphaned = False

    def visit(self, snapshot: DirSnapshot) -> bool:
        if snapshot.has(self.config.example_name) and not snapshot.has(self.config.env_name):
            logger.info(
                "%s without %s in %s",
                self.config.example_name, self.config.env_name, snapshot.path,
            )
            self._orphaned = True
            return False
        return True

    def findings(self) -> Findings:
        return Findings(target=self.target, flag=self._orphaned)
