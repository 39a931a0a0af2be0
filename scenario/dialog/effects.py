"""
Variable effects - turns a SCRIPT cell into variable assignments.

The parser never executes scripts. It only asks an effect extractor for
the assignments that apply before and after a line. The default
extractor understands statements separated by ``;`` or newlines:

```
enter: $met_guard = true
$gold = 10; exit: $mood = "angry"
```

``enter:`` statements apply before the line is played, ``exit:`` and
unprefixed statements apply after it.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VariableAssignment:
    """A single ``$name = value`` effect."""
    name: str
    value: Any
    raw: str = ""


@dataclass
class ScriptEffects:
    """Assignments applied before and after a line."""
    before: list[VariableAssignment] = field(default_factory=list)
    after: list[VariableAssignment] = field(default_factory=list)


# Callable[[script cell], ScriptEffects]
EffectExtractor = Callable[[str], ScriptEffects]

STATEMENT_SEPARATOR = re.compile(r'[;\n]')
VARIABLE_PATTERN = re.compile(r'^\$(\w+)\s*=\s*(.+)$')
PHASE_PATTERN = re.compile(r'^(enter|exit)\s*:\s*(.*)$')


def parse_value(raw: str) -> Any:
    """Decode a value as JSON, falling back to the raw string."""
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def extract_effects(script: str) -> ScriptEffects:
    """Default effect extractor."""
    effects = ScriptEffects()
    if not script or not script.strip():
        return effects

    for statement in STATEMENT_SEPARATOR.split(script):
        statement = statement.strip()
        if not statement:
            continue

        target = effects.after
        match = PHASE_PATTERN.match(statement)
        if match:
            if match.group(1) == 'enter':
                target = effects.before
            statement = match.group(2).strip()

        match = VARIABLE_PATTERN.match(statement)
        if not match:
            logger.warning(f"Ignoring unrecognised script statement: {statement!r}")
            continue

        value = match.group(2).strip()
        target.append(VariableAssignment(
            name=match.group(1),
            value=parse_value(value),
            raw=value,
        ))

    return effects


def no_effects(script: str) -> ScriptEffects:
    """Extractor that ignores the SCRIPT column entirely."""
    return ScriptEffects()
