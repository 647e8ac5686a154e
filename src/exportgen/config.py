# Generator configuration: where the barrel goes and how specifiers are prefixed
from __future__ import annotations
from dataclasses import dataclass, replace
from .constants import (
  INLINE, SUBDIRECTORY, OUTPUT_MODES, SPECIFIER_PREFIXES,
  DEFAULT_INLINE_BASENAME, DEFAULT_SUBDIR_BASENAME, DEFAULT_OUTPUT_DIR,
)

@dataclass(frozen=True)
class GeneratorConfig:
  output_mode: str = INLINE
  output_base_name: str = DEFAULT_INLINE_BASENAME
  output_dir_name: str = DEFAULT_OUTPUT_DIR
  specifier_prefix: str = "./"
  write_manifest: bool = False

  @classmethod
  def inline(cls, **overrides) -> "GeneratorConfig":
    """Barrel sits in the scanned root, e.g. <root>/index.ts"""
    return replace(cls(), **overrides)

  @classmethod
  def subdirectory(cls, **overrides) -> "GeneratorConfig":
    """Barrel sits in <root>/exports/ with a package.json pointing at it."""
    base = cls(
      output_mode=SUBDIRECTORY,
      output_base_name=DEFAULT_SUBDIR_BASENAME,
      output_dir_name=DEFAULT_OUTPUT_DIR,
      specifier_prefix="../",
      write_manifest=True,
    )
    return replace(base, **overrides)

  @property
  def in_subdirectory(self) -> bool:
    return self.output_mode == SUBDIRECTORY

  def validate(self) -> "GeneratorConfig":
    if self.output_mode not in OUTPUT_MODES:
      raise ValueError(f"unknown output mode {self.output_mode!r} (expected one of {', '.join(OUTPUT_MODES)})")
    if self.specifier_prefix not in SPECIFIER_PREFIXES:
      raise ValueError(f"unknown specifier prefix {self.specifier_prefix!r} (expected one of {', '.join(SPECIFIER_PREFIXES)})")
    if not self.output_base_name or "/" in self.output_base_name:
      raise ValueError(f"invalid output base name {self.output_base_name!r}")
    if self.in_subdirectory and (not self.output_dir_name or "/" in self.output_dir_name):
      raise ValueError(f"invalid output directory name {self.output_dir_name!r}")
    return self
