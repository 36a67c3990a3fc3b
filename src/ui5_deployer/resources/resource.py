"""Single file exposed through a resource view."""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ui5_deployer.core.protocols import FileSystemService


@dataclass(frozen=True)
class Resource:
    """
    A file addressed by its virtual path.

    Attributes:
        path: Virtual path, always absolute (e.g. "/view/Main.view.xml")
        fs_path: Location of the backing file on disk
        filesystem: Service used to read the file lazily
    """
    path: str
    fs_path: Path
    filesystem: FileSystemService = field(repr=False, compare=False)

    @property
    def name(self) -> str:
        return self.path.rsplit('/', 1)[-1]

    @property
    def size(self) -> int:
        return self.filesystem.file_size(self.fs_path)

    def get_bytes(self) -> bytes:
        return self.filesystem.read_bytes(self.fs_path)

    def get_string(self, encoding: Optional[str] = 'utf-8') -> str:
        return self.get_bytes().decode(encoding)
