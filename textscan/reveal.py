import os
import shutil
import subprocess
import sys

from .logs import get_logger


def reveal_command(path: str) -> list[str] | str:
    """Command that opens the host file manager with ``path`` selected.

    On Windows it is one command line so only the path sits inside the
    quotes: ``explorer /select,"<path>"``.
    """
    path = os.path.abspath(path)
    if sys.platform.startswith("win"):
        return f'explorer /select,"{path}"'
    if sys.platform == "darwin":
        return ["open", "-R", path]
    for manager in ("nautilus", "dolphin"):
        exe = shutil.which(manager)
        if exe:
            return [exe, "--select", path]
    # xdg-open cannot select a file; show the folder holding it.
    return ["xdg-open", os.path.dirname(path)]


def reveal_in_file_manager(path: str) -> bool:
    cmd = reveal_command(path)
    try:
        subprocess.Popen(cmd, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except OSError as e:
        get_logger().warning("Could not reveal %s: %s", path, e)
        return False
    return True
