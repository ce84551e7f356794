"""File system access used by the configuration store."""

import os
import logging
import shutil
import tempfile


class LocalFileSystem:
    """Reads and writes text files on the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    def read_text(self, path: str) -> str:
        """Read a whole file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    def write_text(self, path: str, content: str) -> None:
        """Replace the content of a file.

        The new content goes to a temporary file in the same directory which
        is then moved over the destination, so readers see either the old or
        the new file and never a half-written one.

        Args:
            path: Destination file
            content: Text to write
        """
        directory = os.path.dirname(path) or '.'
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.tmp-')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            # mkstemp creates 0600; keep the mode of the file being replaced
            if os.path.exists(path):
                shutil.copymode(path, tmp_path)
            os.replace(tmp_path, path)
        except OSError:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        logging.debug(f"Wrote {len(content)} characters to {path}")

    def ensure_directory(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)
