import os


def ensure_directory(path):
    """Creates `path` and any missing parents. An existing directory is left alone."""
    os.makedirs(path, exist_ok=True)


def write_header(path, header: bytes) -> int:
    """Creates (or truncates) `path` and writes `header`. Returns the header length."""
    with open(path, "wb") as file:
        file.write(header)
    return len(header)
