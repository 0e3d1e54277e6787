"""Configuration management for projaudit."""

import dataclasses
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Union
import yaml

@dataclass
class TraversalConfig:
    """Directories the walker never descends into (compared lowercase)."""
    exclude_dirs: List[str] = field(default_factory=lambda: [".git", "dist", "node_modules"])

    def excluded(self) -> frozenset:
        return frozenset(name.lower() for name in self.exclude_dirs)

@dataclass
class MarkerConfig:
    """Name patterns for marker files checked for duplicates (case-insensitive)."""
    readme_pattern: str = r"^README(?:\.md)?$"
    gitignore_pattern: str = r"^\.gitignore$"

@dataclass
class EnvConfig:
    """Environment template and the real file it should be paired with."""
    example_name: str = ".env.example"
    env_name: str = ".env"

@dataclass
class LockFileConfig:
    """Recognised lock files mapped to their package manager label."""
    managers: Dict[str, str] = field(default_factory=lambda: {
        "package-lock.json": "npm",
        "yarn.lock": "yarn",
        "pnpm-lock.yaml": "pnpm",
        "bun.lockb": "bun",
    })

@dataclass
class VcsConfig:
    """Settings for the git status query."""
    executable: str = "git"
    modified_code: str = "M"  # porcelain working-tree code for modified files
    timeout: float = 10.0

@dataclass
class CleanupConfig:
    """Settings for empty folder deletion."""
    progress: bool = False

@dataclass
class AuditConfig:
    """Top-level projaudit configuration."""
    traversal: TraversalConfig = field(default_factory=TraversalConfig)
    markers: MarkerConfig = field(default_factory=MarkerConfig)
    env: EnvConfig = field(default_factory=EnvConfig)
    lock_files: LockFileConfig = field(default_factory=LockFileConfig)
    vcs: VcsConfig = field(default_factory=VcsConfig)
    cleanup: CleanupConfig = field(default_factory=CleanupConfig)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'AuditConfig':
        """Load configuration from a YAML file."""
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at the top of {path}")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict) -> 'AuditConfig':
        """Create an AuditConfig from a dictionary, ignoring unknown keys."""
        def create_instance(klass, d):
            if d is None:
                return klass()
            if not isinstance(d, dict):
                raise ValueError(f"Expected a mapping for {klass.__name__}, got {type(d).__name__}")
            names = {f.name for f in dataclasses.fields(klass) if f.init}
            filtered = {k: v for k, v in d.items() if k in names}
            return klass(**filtered)

        cfg = cls(
            traversal=create_instance(TraversalConfig, data.get('traversal')),
            markers=create_instance(MarkerConfig, data.get('markers')),
            env=create_instance(EnvConfig, data.get('env')),
            lock_files=create_instance(LockFileConfig, data.get('lock_files')),
            vcs=create_instance(VcsConfig, data.get('vcs')),
            cleanup=create_instance(CleanupConfig, data.get('cleanup')),
        )
        cfg.validate()
        return cfg

    def validate(self) -> None:
        """Check the shapes the audit relies on.

        Raises:
            ValueError: if a setting has the wrong type or a pattern does not compile
        """
        dirs = self.traversal.exclude_dirs
        if not isinstance(dirs, list) or not all(isinstance(d, str) for d in dirs):
            raise ValueError("traversal.exclude_dirs must be a list of directory names")

        managers = self.lock_files.managers
        if not isinstance(managers, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in managers.items()
        ):
            raise ValueError("lock_files.managers must map lock file names to manager labels")

        for name in ('example_name', 'env_name'):
            if not isinstance(getattr(self.env, name), str):
                raise ValueError(f"env.{name} must be a file name")

        for name in ('readme_pattern', 'gitignore_pattern'):
            pattern = getattr(self.markers, name)
            try:
                re.compile(pattern)
            except (re.error, TypeError) as e:
                raise ValueError(f"markers.{name} is not a valid pattern: {e}") from e

    def to_dict(self) -> dict:
        """Convert the configuration to a dictionary."""
        def asdict(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: asdict(v) for k, v in obj.__dict__.items()}
            elif isinstance(obj, (list, tuple)):
                return [asdict(x) for x in obj]
            elif isinstance(obj, dict):
                return {k: asdict(v) for k, v in obj.items()}
            else:
                return obj

        return asdict(self)

    def to_yaml(self, path: Union[str, Path]) -> None:
        """Save the configuration to a YAML file."""
        with open(path, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

# Default configuration
default_config = AuditConfig()

def get_default_config() -> AuditConfig:
    """Get a deep copy of the default configuration."""
    import copy
    return copy.deepcopy(default_config)

# Import dataclasses after all classes are defined
import dataclasses
