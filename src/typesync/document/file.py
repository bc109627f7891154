import contextlib
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DefinitionsDocument:
    """Handle to the TypeScript definitions file shared by every sync operation.

    Reads and writes are whole-file. Writes land in a sibling temporary file
    that replaces the target in one ``os.replace`` call, so a failed write
    leaves the previous content in place.
    """

    path: Path
    encoding: str = "utf-8"

    @classmethod
    def at(cls, path: str | Path, encoding: str = "utf-8") -> "DefinitionsDocument":
        return cls(Path(path), encoding)

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> str:
        # bytes keep "\r\n" endings intact
        return self.path.read_bytes().decode(self.encoding)

    def write(self, text: str) -> None:
        self._replace(text.encode(self.encoding))
        logger.debug("Wrote %d characters to %s", len(text), self.path)

    def append(self, text: str) -> None:
        if not self.exists():
            self._replace(text.encode(self.encoding))
            logger.info("Created %s", self.path)
            return

        existing = self.path.read_bytes()
        separator = b"" if not existing or existing.endswith(b"\n") else b"\n"
        self._replace(existing + separator + text.encode(self.encoding))
        logger.info("Appended %d line(s) to %s", text.count("\n"), self.path)

    def _replace(self, data: bytes) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        temp_path = Path(temp_name)
        try:
            try:
                temp_file = os.fdopen(fd, "wb")
            except BaseException:
                os.close(fd)
                raise
            with temp_file:
                temp_file.write(data)
                temp_file.flush()
                os.fsync(temp_file.fileno())
            if self.path.exists():
                with contextlib.suppress(OSError):
                    os.chmod(temp_path, self.path.stat().st_mode)
            os.replace(temp_path, self.path)
        finally:
            temp_path.unlink(missing_ok=True)
