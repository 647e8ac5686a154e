#!/usr/bin/env python3
# CLI entry point: exports-gen <path1> <path2> ...
from __future__ import annotations
import argparse, sys
from .config import GeneratorConfig
from .constants import SPECIFIER_PREFIXES
from .paths import resolve_root
from .writer import ExportsGenerator

USAGE = "Usage: exports-gen <path1> <path2> ..."

def build_config(args) -> GeneratorConfig:
  """Map CLI flags onto a GeneratorConfig; unset flags keep the mode's defaults."""
  overrides = {}
  if args.out_name: overrides["output_base_name"] = args.out_name
  if args.out_dir: overrides["output_dir_name"] = args.out_dir
  if args.prefix: overrides["specifier_prefix"] = args.prefix
  if args.no_manifest: overrides["write_manifest"] = False
  if args.subdir:
    return GeneratorConfig.subdirectory(**overrides).validate()
  return GeneratorConfig.inline(**overrides).validate()

def cmd_generate(args) -> int:
  """Generate a barrel for each path, one after another."""
  if not args.paths:
    print("Error: You must provide at least one path as an argument.", file=sys.stderr)
    print(USAGE)
    return 1

  config = build_config(args)
  for p in args.paths:
    ExportsGenerator(resolve_root(p), config).generate()
  # per-path failures are reported by the generator and never change the exit code
  return 0

def main(argv=None) -> int:
  """Main CLI entry point."""
  try:
    from importlib.metadata import version, PackageNotFoundError
    __version__ = version("exports-gen")
  except PackageNotFoundError:
    __version__ = "1.0.0"

  ap = argparse.ArgumentParser(
    prog="exports-gen",
    description="Generate barrel files re-exporting every default-exported module in a directory.",
    epilog="Examples:\n"
           "  exports-gen src/pages                 # writes src/pages/index.(js|ts)\n"
           "  exports-gen src/pages src/lib         # one barrel per path\n"
           "  exports-gen --subdir src/pages        # writes src/pages/exports/module.exports.(js|ts) + package.json\n"
           "  exports-gen -- -drafts                # use -- before paths that start with a dash\n",
    formatter_class=argparse.RawDescriptionHelpFormatter
  )
  ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  ap.add_argument("paths", nargs="*", help="Directories to scan (absolute or relative to the working directory)")
  ap.add_argument("--subdir", action="store_true",
                  help="Write the barrel into an output subdirectory with a package.json manifest")
  ap.add_argument("--out-dir", default=None,
                  help="Output subdirectory name used with --subdir (default: exports)")
  ap.add_argument("--out-name", default=None,
                  help="Barrel base name without extension (default: index, or module.exports with --subdir)")
  ap.add_argument("--prefix", choices=SPECIFIER_PREFIXES, default=None,
                  help="Relative prefix for module specifiers (default: ./, or ../ with --subdir)")
  ap.add_argument("--no-manifest", action="store_true",
                  help="Do not write package.json when using --subdir")
  ap.set_defaults(func=cmd_generate)

  args = ap.parse_args(argv)

  try:
    return args.func(args) or 0
  except KeyboardInterrupt:
    return 130
  except Exception as e:
    print(f"Error: {e}", file=sys.stderr)
    return 1

if __name__ == "__main__":
  sys.exit(main())
