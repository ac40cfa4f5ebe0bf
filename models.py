# models.py
"""Plain data structures built from pyVmomi objects for display and dumping."""

import datetime
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional

from pyVmomi import vim

from constants import MISSING_DISK_NAME


# --- Tag attached to a virtual storage object ---
@dataclass(frozen=True)
class TagEntry:
    """A vSphere tag, identified by its category name and tag name."""
    category: str
    tag: str

    @classmethod
    def from_vim(cls, entry) -> "TagEntry":
        return cls(category=entry.parentCategoryName, tag=entry.tagName)

    def __str__(self) -> str:
        return f"{self.category}:{self.tag}"

    def to_dict(self) -> Dict[str, Any]:
        return {"parentCategoryName": self.category, "tagName": self.tag}


# --- Virtual storage object (first class disk) ---
@dataclass
class VStorageObject:
    """
    Snapshot of a first class disk as retrieved from the datastore.

    Attributes:
        id (str): The storage object id.
        name (str): The logical disk name.
        file_path (Optional[str]): Backing file path; only set for disk file backings.
        create_time (Optional[datetime]): When the disk was created.
        capacity_mb (int): Provisioned capacity in MB.
        tags (List[TagEntry]): Attached tags, filled in only when requested.
    """
    id: str
    name: str
    file_path: Optional[str] = None
    create_time: Optional[datetime.datetime] = None
    capacity_mb: int = 0
    tags: List[TagEntry] = field(default_factory=list)

    @classmethod
    def from_vim(cls, obj) -> "VStorageObject":
        """Builds a snapshot from a ``vim.vslm.VStorageObject``."""
        config = obj.config
        file_path = None
        if isinstance(config.backing, vim.vslm.BaseConfigInfo.DiskFileBackingInfo):
            file_path = config.backing.filePath
        return cls(
            id=config.id.id,
            name=config.name,
            file_path=file_path,
            create_time=config.createTime,
            capacity_mb=config.capacityInMB or 0,
        )

    @classmethod
    def missing(cls, disk_id: str) -> "VStorageObject":
        """Placeholder for an id listed by the datastore whose backing is gone."""
        return cls(id=disk_id, name=MISSING_DISK_NAME)

    def display_name(self, show_path: bool = False) -> str:
        if show_path and self.file_path is not None:
            return self.file_path
        return self.name

    def tags_string(self) -> str:
        return ",".join(str(tag) for tag in self.tags)

    @property
    def capacity_bytes(self) -> int:
        return self.capacity_mb * 1024 * 1024

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "filePath": self.file_path,
            "createTime": self.create_time.isoformat() if self.create_time else None,
            "capacityInMB": self.capacity_mb,
            "tags": [tag.to_dict() for tag in self.tags],
        }


# --- Local account on a host ---
@dataclass(frozen=True)
class HostAccountSpec:
    """Local account specification; removal only needs the id."""
    id: str
    password: Optional[str] = None
    description: Optional[str] = None

    def to_vim(self):
        spec = vim.host.LocalAccountManager.AccountSpecification(id=self.id)
        if self.password is not None:
            spec.password = self.password
        if self.description is not None:
            spec.description = self.description
        return spec
