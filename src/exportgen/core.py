#!/usr/bin/env python3
# Core scanning logic: default-export detection, one-level directory walk, file-type tally
from __future__ import annotations
import os, re, sys
from dataclasses import dataclass, field
from typing import List, Optional
from .config import GeneratorConfig
from .constants import (
  IDENT, RESERVED_WORDS, SCRIPT, TYPED, FAMILY_EXTS, INDEX_NAME, LOG_PREFIX,
)
from .paths import first_segment, resolve_specifier

# export default [async] [function|class|const|let|var] Name   -> group 1
# export default (props) => {                          -> no name
DEFAULT_EXPORT_RE = re.compile(
  rf"export\s+default\s+(?:async\s+)?(?:(?:function|class|const|let|var)\s+)?({IDENT})|export\s+default\s+\(([^)]*)\)\s*=>\s*\{{"
)
_NOT_IDENT_CHARS = re.compile(r"[^\w$]")

def family_of(filename: str) -> Optional[str]:
  for family, exts in FAMILY_EXTS.items():
    if filename.endswith(exts):
      return family
  return None

def strip_family_ext(filename: str) -> str:
  """Button.tsx → Button, module.exports.js → module.exports"""
  stem, _ = os.path.splitext(filename)
  return stem

def is_own_output(filename: str, config: GeneratorConfig) -> bool:
  base = config.output_base_name
  return first_segment(filename) == base or strip_family_ext(filename) == base

def is_index_entry(filename: str) -> bool:
  return "." in filename and first_segment(filename) == INDEX_NAME

def identifier_from(specifier: str) -> Optional[str]:
  name = _NOT_IDENT_CHARS.sub("", specifier)
  if not name: return None
  if name[0].isdigit(): name = "_" + name
  if name in RESERVED_WORDS: return None
  return name

def find_default_export(src: str) -> Optional[str]:
  """
  Return the default-exported name from source text, "" when the default
  export is anonymous, or None when there is no default export at all.
  """
  m = DEFAULT_EXPORT_RE.search(src)
  if not m: return None
  name = m.group(1) or ""
  return "" if name in RESERVED_WORDS else name

def export_statement(name: str, specifier: str, prefix: str = "./") -> str:
  return f"export {{ default as {name} }} from '{prefix}{specifier}';"

def detect_default_export(file_path: str, config: GeneratorConfig) -> Optional[str]:
  """Export statement for one candidate file, or None."""
  try:
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
      src = f.read()
  except OSError as e:
    print(f"{LOG_PREFIX} could not read {file_path}: {e}", file=sys.stderr)
    return None

  name = find_default_export(src)
  if name is None:
    return None
  specifier = resolve_specifier(file_path)
  if not name:
    name = identifier_from(specifier)
    if not name:
      print(f"{LOG_PREFIX} anonymous default export in {file_path} has no usable name; skipped", file=sys.stderr)
      return None
  return export_statement(name, specifier, config.specifier_prefix)

@dataclass
class FileTally:
  """Scanned input files per extension family; decides the barrel's extension."""
  script: List[str] = field(default_factory=list)
  typed: List[str] = field(default_factory=list)

  def add(self, file_path: str) -> Optional[str]:
    family = family_of(os.path.basename(file_path))
    if family == SCRIPT: self.script.append(file_path)
    elif family == TYPED: self.typed.append(file_path)
    return family

  @property
  def conflict(self) -> bool:
    return bool(self.script) and bool(self.typed)

  def family(self) -> Optional[str]:
    if self.conflict: return "conflict"
    if self.typed: return TYPED
    if self.script: return SCRIPT
    return None

@dataclass
class WalkResult:
  root: str
  statements: List[str] = field(default_factory=list)
  tally: FileTally = field(default_factory=FileTally)
  root_error: Optional[str] = None

def _encodable(name: str) -> bool:
  """False for names os.listdir surrogate-escaped (bytes that are not UTF-8)."""
  try:
    name.encode("utf-8")
  except UnicodeEncodeError:
    return False
  return True

def _list(path: str) -> List[str]:
  return sorted(os.listdir(path))

def _sole_index_file(subdir: str, entries: List[str]) -> Optional[str]:
  indexes = [e for e in entries if is_index_entry(e)]
  if len(indexes) != 1:
    # none, or ambiguous (index.js next to index.ts)
    return None
  if family_of(indexes[0]) is None:
    return None
  path = os.path.join(subdir, indexes[0])
  return path if not os.path.isdir(path) else None

def walk_directory(root: str, config: GeneratorConfig) -> WalkResult:
  """
  Scan root and each immediate subdirectory. Direct files are candidates by
  extension; a subdirectory contributes its single index.* file, if any.
  """
  result = WalkResult(root=root)
  try:
    entries = _list(root)
  except OSError as e:
    print(f"{LOG_PREFIX} error reading directory {root}: {e}", file=sys.stderr)
    result.root_error = str(e)
    return result

  direct = {SCRIPT: [], TYPED: []}
  subdirs = []
  for name in entries:
    path = os.path.join(root, name)
    if os.path.isdir(path):
      subdirs.append(path)
      continue
    family = family_of(name)
    if family is None: continue
    # never rescan our own previous output
    if is_own_output(name, config): continue
    if not _encodable(name):
      print(f"{LOG_PREFIX} skipping {path!r}: file name is not valid UTF-8", file=sys.stderr)
      continue
    direct[family].append(path)

  for family in (SCRIPT, TYPED):
    for path in direct[family]:
      result.tally.add(path)
      stmt = detect_default_export(path, config)
      if stmt: result.statements.append(stmt)

  for subdir in subdirs:
    try:
      sub_entries = _list(subdir)
    except OSError as e:
      print(f"{LOG_PREFIX} skipping {subdir}: {e}", file=sys.stderr)
      continue
    index_path = _sole_index_file(subdir, sub_entries)
    if index_path is None: continue
    if not _encodable(os.path.basename(subdir)):
      print(f"{LOG_PREFIX} skipping {subdir!r}: directory name is not valid UTF-8", file=sys.stderr)
      continue
    result.tally.add(index_path)
    stmt = detect_default_export(index_path, config)
    if stmt: result.statements.append(stmt)

  return result
