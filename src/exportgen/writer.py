#!/usr/bin/env python3
# Barrel writer: picks the output extension from the tally and persists the barrel
from __future__ import annotations
import json, os, sys
from dataclasses import dataclass, field
from typing import List, Optional
from .config import GeneratorConfig
from .constants import OUTPUT_EXT, LOG_PREFIX
from .core import FileTally, walk_directory
from .paths import output_dir, output_file, manifest_path

WRITTEN = "written"
EMPTY = "empty"
CONFLICT = "conflict"
ROOT_ERROR = "root_error"
WRITE_ERROR = "write_error"

@dataclass
class GenerateResult:
  root: str
  status: str
  statements: List[str] = field(default_factory=list)
  output_path: Optional[str] = None
  error: Optional[str] = None

  @property
  def ok(self) -> bool:
    return self.status == WRITTEN

def choose_extension(tally: FileTally) -> Optional[str]:
  """.ts for typed-only input, .js for script-only, None on conflict or nothing scanned."""
  if tally.conflict: return None
  family = tally.family()
  return OUTPUT_EXT.get(family) if family else None

def render_barrel(statements: List[str]) -> str:
  return "\n".join(statements)

def write_barrel(root: str, config: GeneratorConfig, ext: str, statements: List[str]) -> str:
  """Write the barrel (and manifest when configured); returns the barrel path. Raises OSError or UnicodeError."""
  # encoded before open: a failure here leaves the previous barrel intact
  data = render_barrel(statements).encode("utf-8")
  dest_dir = output_dir(root, config)
  if config.in_subdirectory:
    os.makedirs(dest_dir, exist_ok=True)
  dest = output_file(root, config, ext)
  with open(dest, "wb") as f:
    f.write(data)
  if config.write_manifest:
    rel = os.path.relpath(dest, root).replace(os.sep, "/")
    with open(manifest_path(root), "w", encoding="utf-8") as f:
      f.write(json.dumps({"main": rel}))
  return dest

class ExportsGenerator:
  def __init__(self, root: str, config: GeneratorConfig|None = None):
    self.root = root
    self.config = (config or GeneratorConfig.inline()).validate()

  def generate(self) -> GenerateResult:
    walk = walk_directory(self.root, self.config)
    if walk.root_error is not None:
      return GenerateResult(self.root, ROOT_ERROR, error=walk.root_error)

    statements = walk.statements
    if not statements:
      print(f"No valid files with default exports found in the directory '{self.root}'.")
      return GenerateResult(self.root, EMPTY)

    ext = choose_extension(walk.tally)
    if ext is None:
      print("Conflict between TypeScript and JavaScript files please resolve before exports can be created "
            f"(in '{self.root}')", file=sys.stderr)
      return GenerateResult(self.root, CONFLICT, statements=statements)

    try:
      dest = write_barrel(self.root, self.config, ext, statements)
    except (OSError, UnicodeError) as e:
      print(f"{LOG_PREFIX} error writing exports for {self.root}: {e}", file=sys.stderr)
      return GenerateResult(self.root, WRITE_ERROR, statements=statements, error=str(e))

    print(f"Index file '{os.path.basename(dest)}' with exports generated successfully in the directory '{os.path.dirname(dest)}'.")
    return GenerateResult(self.root, WRITTEN, statements=statements, output_path=dest)
