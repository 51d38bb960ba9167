import os
from dataclasses import dataclass, asdict, fields


@dataclass
class VFSConfig:
    """
    Settings shared by the sector store and the VFS façade.

    The base directory plays the role of the storage prefix on the device
    (for example the SD card mount point).
    """

    base_directory: str = "vfs_data"
    index_file_name: str = "index.txt"
    sector_prefix: str = ""
    encoding: str = "utf-8"
    atomic_index_writes: bool = True
    create_base_directory: bool = True
    log_level: str = "WARNING"

    ENV_PREFIX = "SECTORVFS_"

    def validate(self) -> None:
        """Reject settings under which the index could collide with a sector."""
        if not self.base_directory:
            raise ValueError("base_directory must not be empty")
        if not self.index_file_name:
            raise ValueError("index_file_name must not be empty")
        if "/" in self.index_file_name or "/" in self.sector_prefix:
            raise ValueError("index and sector file names must be flat")

        stem = self.index_file_name
        if self.sector_prefix:
            if not stem.startswith(self.sector_prefix):
                return
            stem = stem[len(self.sector_prefix):]
        if stem.isdigit():
            raise ValueError(
                f"index file name {self.index_file_name!r} collides with a sector name")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'VFSConfig':
        """Build a config from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ=None) -> 'VFSConfig':
        """
        Read overrides from environment variables.

        ``SECTORVFS_BASE_DIRECTORY=/usd`` sets ``base_directory`` and so on.
        Boolean fields accept 1/true/yes/on.
        """
        environ = os.environ if environ is None else environ
        config = cls()
        for f in fields(cls):
            raw = environ.get(prefix + f.name.upper())
            if raw is None:
                continue
            if isinstance(getattr(config, f.name), bool):
                setattr(config, f.name, raw.strip().lower() in ("1", "true", "yes", "on"))
            else:
                setattr(config, f.name, raw)
        return config
