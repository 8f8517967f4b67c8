"""
a:zak-45
d:20/12/2025
v:1.0.0

Locates the curve presets shipped with the application, from sources or from a
Nuitka / PyInstaller build.

"""

import os

import sys

APP_NAME = "WLEDDimCurve"


def compiled():
    return bool(getattr(sys, 'frozen', False) or '__compiled__' in globals())


def app_dir():
    """
    Folder holding the config/ resources.

    Development: next to this file.
    Compiled: next to the binary (Contents/MacOS on macOS), or inside the
    APP_NAME folder a one-file build extracts to.
    """
    if not compiled():
        return os.path.dirname(os.path.abspath(__file__))

    exe_dir = os.path.dirname(sys.argv[0])
    if sys.platform.lower() == "darwin":
        return os.path.join(os.path.dirname(exe_dir), "MacOS")
    if "NUITKA_ONEFILE_PARENT" in os.environ:
        return os.path.join(exe_dir, APP_NAME)
    return exe_dir


def root_path(filename):
    return os.path.join(app_dir(), filename)


PRESETS_FILE = root_path(os.path.join("config", "curve_presets.json"))
