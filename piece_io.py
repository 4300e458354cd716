import re
from pathlib import Path
from typing import List, Union

from logging_helper import log_info

PIECE_PATTERN = re.compile(r"^[0-9]{6}$")

PathLike = Union[str, Path]


class PieceFileError(ValueError):
    """Raised when a piece file has the wrong extension or content."""


def read_pieces(path: PathLike) -> List[str]:
    file_path = Path(path)
    if file_path.suffix != ".txt":
        raise PieceFileError("Invalid file format. The file must be a .txt file.")
    if not file_path.exists():
        raise FileNotFoundError(f"The file '{file_path}' does not exist.")

    pieces: List[str] = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line_no, raw in enumerate(f.read().splitlines(), start=1):
            line = raw.strip()
            if not PIECE_PATTERN.match(line):
                raise PieceFileError(
                    f"Invalid line {line_no} in file: '{line}'. Each line must be a 6-digit number."
                )
            pieces.append(line)

    if not pieces:
        raise PieceFileError(f"The file '{file_path}' contains no pieces.")

    log_info("File validation successful.")
    return pieces


def save_sequence(sequence: List[str], path: PathLike) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write("\n".join(sequence))
    log_info(f"Sorted sequence saved to {out_path}")
    return out_path
