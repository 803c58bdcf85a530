import logging
from typing import List, Optional

from preset_kit.models.rule import AssemblyOptions, RuleDefinition
from preset_kit.rules.catalog import DEFAULT_CATALOG, RuleCatalog

logger = logging.getLogger(__name__)

SECTION_SEPARATOR = "\n\n---\n\n"


def render_section(rule: RuleDefinition, content: str) -> str:
    return f"## {rule.name}\n\n{content}"


class RuleAssembler:
    """
    Composes the auxiliary rule text from a catalog.
    Filtering uses the allow-list, the static enabled flag and the degradation gate.
    """

    def __init__(self, catalog: Optional[RuleCatalog] = None):
        self.catalog = catalog if catalog is not None else DEFAULT_CATALOG

    def select(self, options: AssemblyOptions) -> List[RuleDefinition]:
        """Surviving rules, highest weight first, catalog order among equals."""
        allowed = set(options.enabled_rules) if options.enabled_rules is not None else None

        selected = []
        for rule in self.catalog.list_all():
            if allowed is not None and rule.key not in allowed:
                continue
            if not rule.enabled:
                continue
            if not rule.condition.is_met(options.degradation):
                continue
            selected.append(rule)

        # sorted() is stable, so ties keep catalog order
        return sorted(selected, key=lambda r: r.weight, reverse=True)

    def assemble(self, options: Optional[AssemblyOptions] = None) -> str:
        options = options or AssemblyOptions()
        rules = self.select(options)
        overrides = options.custom_rules or {}

        sections = []
        for rule in rules:
            content = overrides.get(rule.key) or rule.content
            sections.append(render_section(rule, content))

        logger.debug(
            f"Assembled {len(sections)} rule modules "
            f"(degradation={options.degradation}): {[r.key for r in rules]}"
        )
        return SECTION_SEPARATOR.join(sections)


def assemble_rules(options: Optional[AssemblyOptions] = None) -> str:
    return RuleAssembler().assemble(options)


def get_minimal_rules(degradation: Optional[float] = None) -> str:
    """Rules relevant to the current state only, with no user overrides."""
    return assemble_rules(AssemblyOptions(degradation=degradation))
