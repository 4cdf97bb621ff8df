"""
Word Bank: Vocabulary for naming-convention drills.

Every word is lowercase ASCII so that any case rule applied to a phrase
built from these words is unambiguous.
"""

from __future__ import annotations

# =============================================================================
# Word Bank
# =============================================================================

WORDS: tuple[str, ...] = (
    # Basic
    "user", "name", "email", "password", "address", "phone", "message", "text",
    "data", "file", "folder", "path", "link", "url", "image", "video",
    # Database
    "database", "table", "column", "row", "query", "record", "index", "key",
    "primary", "foreign", "schema", "migration", "transaction", "connection",
    # Programming
    "function", "method", "class", "object", "variable", "constant", "array", "list",
    "string", "number", "boolean", "null", "undefined", "type", "interface", "struct",
    # Actions
    "create", "read", "update", "delete", "insert", "select", "remove", "add",
    "get", "set", "fetch", "send", "post", "put", "patch", "save",
    "load", "download", "upload", "export", "import", "parse", "format", "convert",
    # Web
    "server", "client", "request", "response", "api", "endpoint", "route", "handler",
    "controller", "model", "view", "service", "repository", "middleware", "filter",
    # Modifiers
    "first", "last", "next", "previous", "current", "total", "count", "sum",
    "max", "min", "average", "new", "old", "active", "inactive", "enabled",
    "disabled", "visible", "hidden", "public", "private", "protected", "static",
    # Status
    "success", "error", "warning", "info", "pending", "complete", "failed", "valid",
    "invalid", "required", "optional", "default", "custom", "standard", "temp",
    # Structures
    "item", "map", "queue", "stack", "tree", "graph",
    "node", "edge", "parent", "child", "root", "leaf", "level", "depth",
    # Time
    "time", "date", "timestamp", "created", "updated", "deleted", "start", "end",
    "duration", "timeout", "interval", "schedule", "delay", "expired",
    # Auth & Security
    "auth", "token", "session", "cookie", "login", "logout", "register", "verify",
    "encrypt", "decrypt", "hash", "salt", "secure", "permission", "role", "access",
    # Operations
    "sort", "search", "find", "match", "compare", "merge", "split",
    "join", "concat", "append", "prepend", "replace", "clear", "reset",
    # Config & Settings
    "config", "setting", "option", "preference", "parameter", "argument", "value",
    "flag", "toggle", "switch", "mode", "state", "status", "priority",
)
