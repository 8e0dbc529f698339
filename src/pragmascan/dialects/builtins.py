# topmark:header:start
#
#   project      : PragmaScan
#   file         : builtins.py
#   file_relpath : src/pragmascan/dialects/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in comment dialects.

Exports:
    DIALECTS (list[CommentDialect]): Definitions grouped by comment family:
        pound (``#``), slash (``//``, plus ``/*`` for C-family block openers),
        markup (``<!--``), single-file components (``<!--`` then ``//``),
        double-dash (``--``) and block-only stylesheets (``/*``).

Notes:
    - Block openers are matched as prefixes only; closers such as ``*/`` or
      ``-->`` are left in the comment text and ignored by the grammar.
"""

from __future__ import annotations

from pragmascan.dialects.base import CommentDialect

POUND: tuple[str, ...] = ("#",)
SLASH: tuple[str, ...] = ("//",)
C_FAMILY: tuple[str, ...] = ("//", "/*")
MARKUP: tuple[str, ...] = ("<!--",)
COMPONENT: tuple[str, ...] = ("<!--", "//")
DOUBLE_DASH: tuple[str, ...] = ("--",)

DIALECTS: list[CommentDialect] = [
    # --- pound ---
    CommentDialect(
        name="python",
        comment_prefixes=POUND,
        extensions=(".py", ".pyi", ".pyw"),
        description="Python sources",
    ),
    CommentDialect(
        name="shell",
        comment_prefixes=POUND,
        extensions=(".sh", ".bash", ".zsh"),
        description="POSIX shell and Bash scripts",
    ),
    CommentDialect(
        name="ruby",
        comment_prefixes=POUND,
        extensions=(".rb",),
        filenames=("Gemfile", "Rakefile"),
        description="Ruby sources",
    ),
    CommentDialect(
        name="perl",
        comment_prefixes=POUND,
        extensions=(".pl", ".pm"),
        description="Perl sources",
    ),
    CommentDialect(
        name="r",
        comment_prefixes=POUND,
        extensions=(".r", ".R"),
        description="R sources",
    ),
    CommentDialect(
        name="yaml",
        comment_prefixes=POUND,
        extensions=(".yaml", ".yml"),
        description="YAML documents",
    ),
    CommentDialect(
        name="toml",
        comment_prefixes=POUND,
        extensions=(".toml",),
        description="TOML documents",
    ),
    CommentDialect(
        name="dockerfile",
        comment_prefixes=POUND,
        extensions=(".dockerfile",),
        filenames=("Dockerfile", "Containerfile"),
        description="Dockerfiles",
    ),
    CommentDialect(
        name="makefile",
        comment_prefixes=POUND,
        extensions=(".mk",),
        filenames=("Makefile", "GNUmakefile", "makefile"),
        description="Makefiles",
    ),
    CommentDialect(
        name="terraform",
        comment_prefixes=("#", "//"),
        extensions=(".tf", ".tfvars", ".hcl"),
        description="Terraform / HCL configuration",
    ),
    # --- slash ---
    CommentDialect(
        name="go",
        comment_prefixes=SLASH,
        extensions=(".go",),
        description="Go sources",
    ),
    CommentDialect(
        name="c",
        comment_prefixes=C_FAMILY,
        extensions=(".c", ".h"),
        description="C sources and headers",
    ),
    CommentDialect(
        name="cpp",
        comment_prefixes=C_FAMILY,
        extensions=(".cc", ".cpp", ".cxx", ".hh", ".hpp", ".hxx"),
        description="C++ sources and headers",
    ),
    CommentDialect(
        name="cs",
        comment_prefixes=C_FAMILY,
        extensions=(".cs",),
        description="C# sources",
    ),
    CommentDialect(
        name="java",
        comment_prefixes=C_FAMILY,
        extensions=(".java",),
        description="Java sources",
    ),
    CommentDialect(
        name="kotlin",
        comment_prefixes=C_FAMILY,
        extensions=(".kt", ".kts"),
        description="Kotlin sources",
    ),
    CommentDialect(
        name="scala",
        comment_prefixes=C_FAMILY,
        extensions=(".scala", ".sc"),
        description="Scala sources",
    ),
    CommentDialect(
        name="swift",
        comment_prefixes=C_FAMILY,
        extensions=(".swift",),
        description="Swift sources",
    ),
    CommentDialect(
        name="rust",
        comment_prefixes=SLASH,
        extensions=(".rs",),
        description="Rust sources",
    ),
    CommentDialect(
        name="javascript",
        comment_prefixes=C_FAMILY,
        extensions=(".js", ".mjs", ".cjs", ".jsx"),
        description="JavaScript sources (*.js, *.mjs, *.cjs, *.jsx)",
    ),
    CommentDialect(
        name="typescript",
        comment_prefixes=C_FAMILY,
        extensions=(".ts", ".mts", ".cts", ".tsx", ".d.ts"),
        description="TypeScript sources",
    ),
    CommentDialect(
        name="php",
        comment_prefixes=("//", "#"),
        extensions=(".php",),
        description="PHP sources",
    ),
    CommentDialect(
        name="jsonc",
        comment_prefixes=SLASH,
        extensions=(".jsonc",),
        description="JSON with comments",
    ),
    # --- markup ---
    CommentDialect(
        name="html",
        comment_prefixes=MARKUP,
        extensions=(".html", ".htm"),
        description="HyperText Markup Language (HTML)",
    ),
    CommentDialect(
        name="xml",
        comment_prefixes=MARKUP,
        extensions=(".xml", ".xsd", ".xsl", ".xslt", ".svg"),
        description="XML documents",
    ),
    CommentDialect(
        name="markdown",
        comment_prefixes=MARKUP,
        extensions=(".md", ".markdown"),
        description="Markdown documents (HTML comments)",
    ),
    # --- single-file components ---
    CommentDialect(
        name="vue",
        comment_prefixes=COMPONENT,
        extensions=(".vue",),
        description="Vue single-file components",
    ),
    CommentDialect(
        name="svelte",
        comment_prefixes=COMPONENT,
        extensions=(".svelte",),
        description="Svelte components",
    ),
    # --- double dash ---
    CommentDialect(
        name="sql",
        comment_prefixes=DOUBLE_DASH,
        extensions=(".sql",),
        description="SQL scripts",
    ),
    CommentDialect(
        name="lua",
        comment_prefixes=DOUBLE_DASH,
        extensions=(".lua",),
        description="Lua sources",
    ),
    CommentDialect(
        name="haskell",
        comment_prefixes=DOUBLE_DASH,
        extensions=(".hs",),
        description="Haskell sources",
    ),
    # --- block only ---
    CommentDialect(
        name="css",
        comment_prefixes=("/*",),
        extensions=(".css",),
        description="Cascading Style Sheets (CSS)",
    ),
    CommentDialect(
        name="scss",
        comment_prefixes=C_FAMILY,
        extensions=(".scss", ".less"),
        description="SCSS and Less stylesheets",
    ),
]
