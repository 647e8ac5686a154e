# Shared constants: extension families, default output names, identifier pattern
SCRIPT_EXTS = (".js", ".jsx")
TYPED_EXTS = (".ts", ".tsx")

SCRIPT = "script"
TYPED = "typed"
FAMILY_EXTS = {SCRIPT: SCRIPT_EXTS, TYPED: TYPED_EXTS}
# extension written for the barrel of each family
OUTPUT_EXT = {SCRIPT: ".js", TYPED: ".ts"}

INDEX_NAME = "index"

INLINE = "inline"
SUBDIRECTORY = "subdirectory"
OUTPUT_MODES = (INLINE, SUBDIRECTORY)
SPECIFIER_PREFIXES = ("./", "../")

DEFAULT_INLINE_BASENAME = "index"
DEFAULT_SUBDIR_BASENAME = "module.exports"
DEFAULT_OUTPUT_DIR = "exports"
MANIFEST_NAME = "package.json"

LOG_PREFIX = "[exports-gen]"

IDENT = r"[A-Za-z_$][\w$]*"
RESERVED_WORDS = frozenset({
  "async", "await", "break", "case", "catch", "class", "const", "continue",
  "debugger", "default", "delete", "do", "else", "enum", "export", "extends",
  "false", "finally", "for", "function", "if", "import", "in", "instanceof",
  "let", "new", "null", "return", "super", "switch", "this", "throw", "true",
  "try", "typeof", "var", "void", "while", "with", "yield",
})
