import mimetypes
import os
from pathlib import Path
from typing import Tuple, Union


def get_file_name_with_ext(path: Union[str, Path]) -> str:
    """
    Extracts file name with extension from a given path.

    :param path: Path to file.
    :type path: str
    :returns: File name with extension
    :rtype: :class:`str`
    :Usage example:

     .. code-block::

        from cloudinary_lite.io.fs import get_file_name_with_ext

        print(get_file_name_with_ext("/home/admin/photos/IMG_0748.jpeg"))
        # Output: IMG_0748.jpeg
    """
    return os.path.basename(path)


def get_mime_type(path: Union[str, Path]) -> str:
    mime_type, _ = mimetypes.guess_type(str(path))
    return mime_type or "application/octet-stream"


def read_file_part(path: Union[str, Path]) -> Tuple[str, bytes, str]:
    """
    Read a local file as a multipart part: ``(file name, content, mime type)``.

    :raises FileNotFoundError: if the path does not exist.
    :raises IsADirectoryError: if the path is a directory.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Expected a file, got a directory: {path}")
    return get_file_name_with_ext(path), path.read_bytes(), get_mime_type(path)
