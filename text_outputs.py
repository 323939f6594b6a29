import io
import platform
import re
import subprocess
import zipfile
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple


SEP_RE = re.compile(r"[\\/]+")


def is_pdf(filename: str) -> bool:
    return (filename or "").lower().endswith(".pdf")


def txt_name(filename: str) -> str:
    """Swap the last extension of a file name for .txt ("a.b.pdf" -> "a.b.txt")."""
    parts = split_relative(filename)
    name = parts[-1] if parts else "document"
    stem, dot, _ext = name.rpartition(".")
    if not dot:
        return name + ".txt"
    return stem + ".txt"


def _dedupe(name: str, seen: set[str]) -> str:
    if name not in seen:
        return name
    stem, dot, ext = name.rpartition(".")
    if not dot:
        stem, ext = name, ""
    n = 2
    while True:
        candidate = f"{stem} ({n}){'.' + ext if ext else ''}"
        if candidate not in seen:
            return candidate
        n += 1


def build_zip(entries: Iterable[Tuple[str, str]]) -> bytes:
    buf = io.BytesIO()
    seen: set[str] = set()
    with zipfile.ZipFile(buf, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, text in entries:
            name = _dedupe(name, seen)
            seen.add(name)
            zf.writestr(name, text.encode("utf-8"))
    return buf.getvalue()


def split_relative(path: str) -> List[str]:
    """Split a browser relative path into safe components (no '.', '..' or empty parts)."""
    return [p for p in SEP_RE.split(path or "") if p not in ("", ".", "..")]


def resolve_output_root(output_dir: Optional[str], paths: Sequence[str], default_dir: Path) -> Path:
    root = Path(output_dir).expanduser() if output_dir else default_dir
    if paths and paths[0]:
        parts = split_relative(paths[0])
        if parts:
            root = root / parts[0]
    return root


def relative_output_path(output_root: Path, rel_path: Optional[str], filename: str) -> Path:
    parts = split_relative(rel_path) if rel_path else []
    if not parts:
        return output_root / txt_name(filename)
    # the top folder is already part of output_root
    if len(parts) > 1:
        parts = parts[1:]
    parts[-1] = txt_name(parts[-1])
    return output_root.joinpath(*parts)


def open_folder_command(path: Path, system: Optional[str] = None) -> List[str]:
    system = (system or platform.system()).lower()
    if system == "darwin":
        return ["open", str(path)]
    if system == "linux":
        return ["xdg-open", str(path)]
    return ["explorer", str(path)]


def open_folder(path: Path) -> subprocess.Popen:
    """Open a folder in the OS file browser without waiting for it."""
    return subprocess.Popen(
        open_folder_command(path),
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
    )
