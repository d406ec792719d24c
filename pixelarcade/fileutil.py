"""Reading whole files."""

import sys


def get_file_content(file_path, throws=True):
    """Return the text of a file.

    When the file cannot be opened, raise ``OSError`` if ``throws`` is true,
    otherwise report the problem on stderr and return an empty string.
    """
    try:
        with open(file_path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except OSError as exc:
        message = f"Unable to open file: {file_path}!"
        if throws:
            raise OSError(message) from exc
        print(message, file=sys.stderr)
        return ""