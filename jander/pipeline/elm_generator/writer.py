"""Write generated source to its destination."""

from pathlib import Path


def write_generated_file(text: str, destination: Path) -> None:
    r"""Write ``text`` to ``destination``, creating parent directories as needed.

    Any existing file is overwritten. Unlike best-effort writers, errors are
    not swallowed: a failed write must stop the build.

    Parameters
    ----------
    text : str
        Content to write (UTF-8).
    destination : Path
        Output file path.

    Raises
    ------
    OSError
        If a directory cannot be created or the file cannot be written.

    Examples
    --------
    >>> import tempfile
    >>> from pathlib import Path
    >>> target = Path(tempfile.mkdtemp()) / "gen" / "Contents.elm"
    >>> write_generated_file("module Contents exposing (..)\n", target)
    >>> target.read_text(encoding="utf-8").startswith("module")
    True
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")
