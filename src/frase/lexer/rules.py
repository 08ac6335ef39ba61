"""Rule sets: core rules combined with the rules of enabled extensions.

A RuleSet is derived from the set of enabled extension names only, so it
is computed once per distinct set and shared by every lexing call that
uses it. RuleSets are never mutated after construction.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache

from frase.lexer.assembler import CORE_ASSEMBLY_RULES, AssemblyRule
from frase.lexer.disambiguator import CORE_ROLE_RULES, RoleRule, compile_role_rules


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Compiled rules for one combination of extensions.

    Attributes:
        role_rules: Punctuation character -> ordered role rules
        assembly_rules: Assembly rules, extensions first

    """

    role_rules: Mapping[str, tuple[RoleRule, ...]]
    assembly_rules: tuple[AssemblyRule, ...]


CORE_RULES = RuleSet(CORE_ROLE_RULES, CORE_ASSEMBLY_RULES)


@lru_cache(maxsize=64)
def build_rule_set(extensions: frozenset[str]) -> RuleSet:
    """Combine core rules with the rules of the named extensions.

    Extensions contribute in name order, so the result does not depend on
    set iteration order.

    Args:
        extensions: Enabled extension names

    Returns:
        Shared, read-only RuleSet

    Raises:
        ExtensionError: If a name is not registered
    """
    if not extensions:
        return CORE_RULES

    from frase.extensions import get_extension

    role_extra: dict[str, list[RoleRule]] = {}
    assembly: list[AssemblyRule] = []
    for name in sorted(extensions):
        extension = get_extension(name)
        for char, rules in extension.role_rules().items():
            role_extra.setdefault(char, []).extend(rules)
        assembly.extend(extension.assembly_rules())

    return RuleSet(
        role_rules=compile_role_rules(role_extra),
        assembly_rules=(*assembly, *CORE_ASSEMBLY_RULES),
    )
