"""
Resources module - script acquisition.
"""

from scenario.resources.loader import (
    ScriptSource,
    FileScriptSource,
    BundledScriptSource,
    HttpScriptSource,
    load_script_text,
)

__all__ = [
    "ScriptSource",
    "FileScriptSource",
    "BundledScriptSource",
    "HttpScriptSource",
    "load_script_text",
]
