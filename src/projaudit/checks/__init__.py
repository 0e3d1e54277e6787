"""Hygiene checks for projaudit.

The filesystem checks are visitors fed by :func:`projaudit.walker.walk`;
the unstaged file check queries version control directly.
"""

from .empty_folders import EmptyFolderCheck
from .env_example import EnvExampleCheck
from .lock_files import LockFileCheck, LockFileVerdict, classify_lock_files
from .duplicates import DuplicateMarkerCheck, MarkerKind
from .unstaged import UnstagedFileCheck


__all__ = [
    'EmptyFolderCheck',
    'EnvExampleCheck',
    'LockFileCheck',
    'LockFileVerdict',
    'classify_lock_files',
    'DuplicateMarkerCheck',
    'MarkerKind',
    'UnstagedFileCheck',
]
