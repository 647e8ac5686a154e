import os
from .config import GeneratorConfig
from .constants import INDEX_NAME, MANIFEST_NAME

def resolve_root(arg: str, cwd: str|None = None) -> str:
    """
    Scan roots may be absolute or relative to the working directory.
    e.g., exports-gen src/pages → <cwd>/src/pages
    """
    return os.path.abspath(os.path.join(cwd or os.getcwd(), arg))

def first_segment(filename: str) -> str:
    """Name up to the first dot: Button.test.tsx → Button"""
    return filename.split(".")[0]

def resolve_specifier(file_path: str) -> str:
    """
    Module specifier for a file, without the relative prefix.
    widget.js → widget, moduleFoo/index.ts → moduleFoo
    """
    base = first_segment(os.path.basename(file_path))
    if base == INDEX_NAME:
        return os.path.basename(os.path.dirname(os.path.abspath(file_path)))
    return base

def output_dir(root: str, config: GeneratorConfig) -> str:
    if config.in_subdirectory:
        return os.path.join(root, config.output_dir_name)
    return root

def output_file(root: str, config: GeneratorConfig, ext: str) -> str:
    return os.path.join(output_dir(root, config), config.output_base_name + ext)

def manifest_path(root: str) -> str:
    return os.path.join(root, MANIFEST_NAME)
