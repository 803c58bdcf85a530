from preset_kit.rules.assembler import RuleAssembler, assemble_rules, get_minimal_rules
from preset_kit.rules.catalog import DEFAULT_CATALOG, RuleCatalog
from preset_kit.rules.code_rules import assemble_code_rules

__all__ = [
    "RuleAssembler",
    "assemble_rules",
    "get_minimal_rules",
    "DEFAULT_CATALOG",
    "RuleCatalog",
    "assemble_code_rules",
]
